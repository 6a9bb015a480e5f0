import sys

from snoboard.main import main

sys.exit(main())
