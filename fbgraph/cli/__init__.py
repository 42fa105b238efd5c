"""Command line interface for fbgraph."""
