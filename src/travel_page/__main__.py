"""Main entry point for ``python -m travel_page``."""

from .cli import main

if __name__ == "__main__":
    main()
