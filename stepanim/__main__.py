"""Allow ``python -m stepanim``."""

from stepanim.cli.main import main

if __name__ == "__main__":
    main()
