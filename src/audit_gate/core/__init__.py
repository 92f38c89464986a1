"""Application settings and startup checks."""
