import sys

from vidstrip.cli import main

sys.exit(main())
