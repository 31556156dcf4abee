import sys

from loancalc.main import main

sys.exit(main())
