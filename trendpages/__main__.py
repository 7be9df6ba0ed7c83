import sys

from trendpages.main import main

sys.exit(main())
