"""Hotkey bindings as stored in the settings file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Hotkey:
    """A key with optional ctrl/shift modifiers, written like "ctrl+shift+R"."""

    key: str
    ctrl: bool = False
    shift: bool = False

    @classmethod
    def parse(cls, text: str) -> "Hotkey":
        parts = [p.strip() for p in text.split("+") if p.strip()]
        if not parts:
            msg = f"Empty hotkey: {text!r}"
            raise ValueError(msg)
        *modifiers, key = parts
        mods = {m.lower() for m in modifiers}
        unknown = mods - {"ctrl", "shift"}
        if unknown:
            msg = f"Unknown modifier(s) in hotkey {text!r}: {sorted(unknown)}"
            raise ValueError(msg)
        return cls(key=key.upper(), ctrl="ctrl" in mods, shift="shift" in mods)

    def __str__(self) -> str:
        parts = []
        if self.ctrl:
            parts.append("ctrl")
        if self.shift:
            parts.append("shift")
        parts.append(self.key)
        return "+".join(parts)
