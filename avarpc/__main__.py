"""Allow ``python -m avarpc``."""

import sys

from avarpc.cli.main import main

sys.exit(main())
