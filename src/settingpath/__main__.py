"""Entry point for ``python -m settingpath``."""

import sys

from settingpath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
