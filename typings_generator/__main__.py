"""Allow ``python -m typings_generator``."""

import sys

from typings_generator.pipeline import main

sys.exit(main())
