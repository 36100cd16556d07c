# =============================================================================
# termpix Entry Point for `python -m termpix`
# =============================================================================
# This module allows termpix to be run as a Python module:
#
#   python -m termpix
#
# This is equivalent to running the 'termpix' command after installation.
# =============================================================================

import sys

from termpix.app import main

if __name__ == "__main__":
    sys.exit(main())
