import sys

from terminal_wordle.cli import main

sys.exit(main())
