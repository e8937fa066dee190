"""Allow running as ``python -m clawlog``."""

from clawlog.cli import app

app()
