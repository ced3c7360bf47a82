"""Command line interface for fixed-size buffers."""
