"""Allow running as ``python -m a11ylint``."""
from a11ylint.cli import main

if __name__ == "__main__":
    main()
