import sys

from dual_extrude.cli import main

if __name__ == "__main__":
    sys.exit(main())
