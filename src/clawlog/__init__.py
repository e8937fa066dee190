"""clawlog: browse and search OpenClaw agent session logs."""

__version__ = "0.1.0"
