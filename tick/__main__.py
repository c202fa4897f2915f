import sys

from tick.cli import main

sys.exit(main())
