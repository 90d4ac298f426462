"""Allow ``python -m mdindex <category-dir>``."""

from mdindex.cli import main

if __name__ == "__main__":
    main()
