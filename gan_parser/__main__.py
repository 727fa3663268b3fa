"""Allow `python -m gan_parser`."""
import sys

from gan_parser.cli import main

sys.exit(main())
