import sys

from src.flight_search.cli import main

sys.exit(main())
