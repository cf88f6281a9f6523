"""monokit command-line interface."""
