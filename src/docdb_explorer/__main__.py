import sys

from docdb_explorer.cli import main

sys.exit(main())
