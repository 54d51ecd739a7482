import sys

from kleinian_tools.cli import main

sys.exit(main())
