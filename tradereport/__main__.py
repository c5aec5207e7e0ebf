"""python -m tradereport DATA_FOLDER"""

from tradereport.cli import main

raise SystemExit(main())
