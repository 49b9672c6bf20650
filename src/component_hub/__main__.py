"""Allow ``python -m component_hub``."""

import sys

from component_hub.app import main

sys.exit(main())
