"""Allow running cmdslack with `python -m cmdslack`."""

from cmdslack.cli import main

if __name__ == "__main__":
    main()
