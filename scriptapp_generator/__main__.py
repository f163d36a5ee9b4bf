"""Allow ``python -m scriptapp_generator``."""

import sys

from scriptapp_generator.cli.commands import main

sys.exit(main())
