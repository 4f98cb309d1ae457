"""Allow ``python -m condmatch``."""

from condmatch.cli import main

if __name__ == "__main__":
    main()
