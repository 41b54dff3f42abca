"""Build module planning for selected platforms."""
