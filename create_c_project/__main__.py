"""Allow ``python -m create_c_project``."""

import sys

from create_c_project.cli.commands import main

sys.exit(main())
