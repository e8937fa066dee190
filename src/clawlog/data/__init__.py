"""Filesystem access: registry, log discovery, full reads and search."""
