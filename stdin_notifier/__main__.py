import sys

from stdin_notifier.cli import main

sys.exit(main())
