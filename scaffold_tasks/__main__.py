import sys

from scaffold_tasks.cli.commands import main

sys.exit(main())
