"""
sqladminlog - Asynchronous logging provider dispatch for SQL Server admin tooling.

Run from a source checkout: python src/main.py run --input messages.txt
"""

import sys
from sqladminlog.interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
