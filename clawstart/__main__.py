"""Allow `python -m clawstart`."""

from clawstart.main import main

raise SystemExit(main())
