"""Module entry point for `python -m kibana_index_pattern`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
