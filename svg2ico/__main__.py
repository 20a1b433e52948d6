import sys

from svg2ico.cli import main

if __name__ == '__main__':
    sys.exit(main())
