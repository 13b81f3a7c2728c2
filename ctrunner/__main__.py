import sys

from ctrunner.cli.main import main

sys.exit(main())
