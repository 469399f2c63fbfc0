"""Allow ``python -m create_init``."""

from create_init.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
