"""noisekit command-line interface."""
