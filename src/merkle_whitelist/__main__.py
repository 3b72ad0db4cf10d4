import sys

from merkle_whitelist.main import main

sys.exit(main())
