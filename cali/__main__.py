import sys

from cali.cli import main

sys.exit(main())
