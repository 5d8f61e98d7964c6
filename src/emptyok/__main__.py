import sys

from emptyok.server import main

sys.exit(main())
