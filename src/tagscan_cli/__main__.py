import sys

from tagscan_cli.app import main

sys.exit(main())
