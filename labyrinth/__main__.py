import sys

from labyrinth.cli import main

sys.exit(main())
