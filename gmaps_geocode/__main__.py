import sys

from gmaps_geocode.cli import main

sys.exit(main())
