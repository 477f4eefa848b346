import sys

from cacheclip.cli import main

if __name__ == "__main__":
    sys.exit(main())
