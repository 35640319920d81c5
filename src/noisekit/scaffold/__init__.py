"""Post-processing of the generated project."""

from noisekit.scaffold.postprocess import post_process, render_readme, write_readme, write_static_layout

__all__ = ["post_process", "render_readme", "write_readme", "write_static_layout"]
