import sys

from get_private_key.cli import main

sys.exit(main())
