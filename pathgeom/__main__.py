import sys

from pathgeom.cli import main

sys.exit(main())
