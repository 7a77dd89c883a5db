"""Module entry point for `python -m dynamic_type_registry`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
