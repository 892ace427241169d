"""Allow ``python -m gqlcontext``."""

from gqlcontext.cli.main import main

raise SystemExit(main())
