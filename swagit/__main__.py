import sys

from swagit.cli.main import main

sys.exit(main())
