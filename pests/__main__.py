import sys

from pests.main import main

sys.exit(main())
