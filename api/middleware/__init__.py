"""HTTP middleware and per-request dependencies."""
