"""Allow ``python -m igslurp``."""

import sys

from igslurp.cli import main

sys.exit(main())
