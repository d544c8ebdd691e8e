"""Console rendering helpers for the library CLI."""
