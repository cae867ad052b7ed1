import sys

from catalog_search.main import main

sys.exit(main())
