import sys

from commit_art.main import main

sys.exit(main())
