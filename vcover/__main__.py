import sys

from vcover.cli import main

sys.exit(main())
