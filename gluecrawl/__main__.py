import sys

from gluecrawl.cli import main

sys.exit(main())
