"""Allow ``python -m spectree``."""

from spectree.cli import main

if __name__ == "__main__":
    main()
