import sys

from golden_files.cli import main

sys.exit(main())
