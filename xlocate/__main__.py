"""xlocate module entry point"""

import sys

from xlocate.cli import main

if __name__ == "__main__":
    sys.exit(main())
