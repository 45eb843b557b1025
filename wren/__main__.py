import sys

from wren.core.application import main

if __name__ == "__main__":
    sys.exit(main())
