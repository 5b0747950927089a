"""Allow ``python -m mdgen``."""

import sys

from mdgen.cli import main

sys.exit(main())
