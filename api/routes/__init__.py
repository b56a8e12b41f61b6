"""Routes that do not belong to a domain module."""
