"""Command line interface for bitshrink."""
