import sys

from nexus_studio.cli.main import main

sys.exit(main())
