import sys

from gardenwatch.cli import main

sys.exit(main())
