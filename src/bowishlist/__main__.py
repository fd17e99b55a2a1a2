import sys

from bowishlist.cli import main

sys.exit(main())
