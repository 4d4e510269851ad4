import sys

from nora.repl import main

sys.exit(main())
