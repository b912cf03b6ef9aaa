"""Allow ``python -m bfpaths``."""

from bfpaths.cli import main

if __name__ == "__main__":
    main()
