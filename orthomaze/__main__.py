import sys

from orthomaze.cli import main

sys.exit(main())
