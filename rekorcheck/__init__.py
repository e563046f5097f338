"""Verify binary signatures and certificates recorded in a Rekor transparency log."""

__version__ = "0.1.0"