import sys

from envconfig.cli import main

sys.exit(main())
