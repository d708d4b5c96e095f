"""Enables invocation via ``python -m wiegand_converter``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
