"""noisekit - interactive SvelteKit starter scaffolding."""

__version__ = "0.3.0"
