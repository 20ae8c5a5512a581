import sys

from hyprzoom.cli import main

sys.exit(main())
