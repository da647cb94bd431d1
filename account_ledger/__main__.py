"""Allow ``python -m account_ledger``"""

import sys

from .cli import main

sys.exit(main())
