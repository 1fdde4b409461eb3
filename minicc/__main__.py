import sys

from minicc.repl import main

sys.exit(main())
