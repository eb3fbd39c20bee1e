"""Allow ``python -m singen``."""

from .cli import main

raise SystemExit(main())
