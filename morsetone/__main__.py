import sys

from morsetone.main import main

sys.exit(main())
