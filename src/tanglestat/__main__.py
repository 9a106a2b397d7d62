"""Allow running as: python -m tanglestat <file>."""

import sys

from tanglestat.presentation.cli import main

sys.exit(main())
