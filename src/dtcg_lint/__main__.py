"""Allow running as `python -m dtcg_lint`."""

import sys

from .cli import main

sys.exit(main())
