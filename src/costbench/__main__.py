import sys

from costbench.cli import main

sys.exit(main())
