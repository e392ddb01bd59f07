import sys

from infix_evaluator.cli import main

sys.exit(main())
