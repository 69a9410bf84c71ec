"""Allow ``python -m casktoken``."""

from __future__ import annotations

from casktoken.cli.main import main

raise SystemExit(main())
