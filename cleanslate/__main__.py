import sys

from cleanslate.cli import main

sys.exit(main())
