import sys

from polyfft.main import main

sys.exit(main())
