"""Main entry point for the console application."""
from aidu.app import main

if __name__ == "__main__":
    raise SystemExit(main())
