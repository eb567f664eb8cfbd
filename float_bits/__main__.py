import sys

from float_bits.cli import main

if __name__ == '__main__':
    sys.exit(main())
