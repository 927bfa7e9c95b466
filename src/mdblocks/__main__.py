import sys

from mdblocks.cli import main

sys.exit(main())
