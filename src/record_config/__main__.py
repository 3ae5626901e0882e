import sys

from record_config.cli import main

sys.exit(main())
