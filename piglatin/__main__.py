import sys

from piglatin.cli import main

sys.exit(main())
