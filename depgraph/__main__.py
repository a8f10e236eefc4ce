"""Allow ``python -m depgraph``."""

from depgraph.cli import main

if __name__ == "__main__":
    main()
