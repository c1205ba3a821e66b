"""Allow ``python -m marlowe``."""

import sys

from marlowe.cli import main

sys.exit(main())
