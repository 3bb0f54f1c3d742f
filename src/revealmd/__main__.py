import sys

from revealmd.cli import main

sys.exit(main())
