"""Tests for rebuilding and publishing registry snapshots."""

import logging
import threading
import time
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from uuid_translator.build_snapshot import build_snapshot
from uuid_translator.element_registry import ElementRegistry
from uuid_translator.integrity_warning import (
    DUPLICATE_ID,
    INVALID_ENTRY,
    UNPARSEABLE_FILE,
)
from uuid_translator.registry_snapshot import RegistrySnapshot
from uuid_translator.search_by_id import search_by_id
from uuid_translator.search_result import One

FOO_ID = "11111111-1111-1111-1111-111111111111"
SHARED_ID = "4444abcd-4444-4444-4444-44444444abcd"


def _write_elements(path: Path, elements: list[dict]) -> Path:
    path.write_text(yaml.safe_dump({"elements": elements}), encoding="utf-8")
    return path


def test_rebuild_indexes_files(tmp_path: Path) -> None:
    """Verify that elements from several files are indexed by id and name."""
    a = _write_elements(
        tmp_path / "a.yml", [{"id": FOO_ID, "name": "Foo", "type": "Service"}]
    )
    b = _write_elements(
        tmp_path / "b.yml",
        [{"id": "55555555-5555-5555-5555-555555555555", "name": "Baz"}],
    )
    registry = ElementRegistry()
    snap = registry.rebuild({a, b})

    assert registry.current_snapshot() is snap
    assert len(snap) == 2
    foo = snap.by_id[FOO_ID]
    assert (foo.name, foo.kind, foo.file) == ("Foo", "Service", a)
    assert snap.by_name["Baz"][0].kind == "Unknown"
    assert snap.warnings == ()


def test_rebuild_accepts_bare_list_and_ignores_other_yaml(tmp_path: Path) -> None:
    """Verify both document shapes, and that unrelated YAML is skipped quietly."""
    listed = tmp_path / "listed.yml"
    listed.write_text(yaml.safe_dump([{"id": FOO_ID, "name": "Foo"}]))
    other = tmp_path / "other.yml"
    other.write_text("title: not an element file\n")
    empty = tmp_path / "empty.yml"
    empty.write_text("")

    snap = ElementRegistry().rebuild([listed, other, empty])
    assert [el.name for el in snap.elements] == ["Foo"]
    assert snap.warnings == ()


def test_rebuild_duplicate_ids_later_wins(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a duplicate id warns and the later file wins."""
    first = _write_elements(tmp_path / "1.yml", [{"id": SHARED_ID, "name": "Old"}])
    second = _write_elements(
        tmp_path / "2.yml", [{"id": SHARED_ID.upper(), "name": "New"}]
    )
    registry = ElementRegistry()
    with caplog.at_level(logging.WARNING):
        # Processing order is by path, not by the order given.
        snap = registry.rebuild([second, first])

    assert [w.kind for w in snap.warnings] == [DUPLICATE_ID]
    assert "Duplicate id" in caplog.text
    result = search_by_id(snap, SHARED_ID)
    assert isinstance(result, One)
    assert result.element.name == "New"
    assert "Old" not in snap.by_name
    assert len(snap) == 1


def test_rebuild_skips_bad_files_and_entries(tmp_path: Path) -> None:
    """Verify that unparseable files and incomplete entries only warn."""
    good = _write_elements(
        tmp_path / "good.yml",
        [{"id": FOO_ID, "name": "Foo"}, {"id": "", "name": "NoId"}, "junk"],
    )
    broken = tmp_path / "broken.yml"
    broken.write_text("elements: [unclosed\n")
    scalar = tmp_path / "scalar.yml"
    scalar.write_text(yaml.safe_dump({"elements": "nope"}))
    missing = tmp_path / "missing.yml"

    snap = ElementRegistry().rebuild([good, broken, scalar, missing])

    assert [el.name for el in snap.elements] == ["Foo"]
    kinds = sorted(w.kind for w in snap.warnings)
    assert kinds == sorted(
        [INVALID_ENTRY] * 3 + [UNPARSEABLE_FILE] * 2
    )


def test_rebuild_replaces_previous_snapshot(tmp_path: Path) -> None:
    """Verify that a rebuild publishes a new snapshot and leaves the old intact."""
    f = _write_elements(tmp_path / "a.yml", [{"id": FOO_ID, "name": "Foo"}])
    registry = ElementRegistry()
    old = registry.rebuild([f])

    _write_elements(f, [{"id": FOO_ID, "name": "Renamed"}])
    new = registry.rebuild([f])

    assert old is not new
    assert old.by_id[FOO_ID].name == "Foo"
    assert registry.current_snapshot().by_id[FOO_ID].name == "Renamed"


def test_snapshot_indexes_are_read_only(tmp_path: Path) -> None:
    """Verify that published indexes cannot be mutated."""
    f = _write_elements(tmp_path / "a.yml", [{"id": FOO_ID, "name": "Foo"}])
    snap = ElementRegistry().rebuild([f])
    with pytest.raises(TypeError):
        snap.by_id["x"] = snap.elements[0]  # type: ignore[index]


def test_concurrent_lookups_never_see_partial_snapshot(tmp_path: Path) -> None:
    """Verify that readers see either the old or the new element set, never a mix."""
    size = 200
    set_a = [
        {"id": f"{i:08x}-0000-0000-0000-000000000000", "name": f"A{i}"}
        for i in range(size)
    ]
    set_b = [
        {"id": f"{i:08x}-1111-1111-1111-111111111111", "name": f"B{i}"}
        for i in range(size)
    ]
    file_a = _write_elements(tmp_path / "a.yml", set_a)
    file_b = _write_elements(tmp_path / "b.yml", set_b)

    registry = ElementRegistry()
    registry.rebuild([file_a])
    stop = threading.Event()
    errors: list[str] = []

    def reader() -> None:
        while not stop.is_set():
            snap = registry.current_snapshot()
            names = {el.name[0] for el in snap.elements}
            if len(snap) != size or len(names) != 1 or len(snap.by_id) != size:
                errors.append(f"torn snapshot: {len(snap)} {names}")

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for i in range(10):
        registry.rebuild([file_b] if i % 2 == 0 else [file_a])
    stop.set()
    for t in threads:
        t.join()

    assert errors == []


def test_rebuilds_are_serialized(tmp_path: Path) -> None:
    """Verify that at most one rebuild runs at a time and the last one is published."""
    files = [
        _write_elements(
            tmp_path / f"{i}.yml", [{"id": FOO_ID, "name": f"Build{i}"}]
        )
        for i in range(5)
    ]
    counter_lock = threading.Lock()
    active = 0
    max_active = 0
    finished: list[RegistrySnapshot] = []

    def slow_build(paths: list[Path]) -> RegistrySnapshot:
        nonlocal active, max_active
        with counter_lock:
            active += 1
            max_active = max(max_active, active)
        time.sleep(0.02)
        snap = build_snapshot(paths)
        with counter_lock:
            active -= 1
            finished.append(snap)
        return snap

    registry = ElementRegistry()
    with patch("uuid_translator.element_registry.build_snapshot", slow_build):
        threads = [
            threading.Thread(target=registry.rebuild, args=([f],)) for f in files
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    assert max_active == 1
    assert len(finished) == len(files)
    assert registry.current_snapshot() is finished[-1]
