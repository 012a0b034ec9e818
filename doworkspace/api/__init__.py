"""HTTP API for do-workspace."""
