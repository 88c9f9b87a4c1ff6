"""Entry point for running the translator CLI from a source checkout."""

from uuid_translator.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
