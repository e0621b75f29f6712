"""Core: settings and wire-level constants."""
