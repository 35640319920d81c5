"""Run context and toolchain configuration.

ScaffoldContext replaces implicit process state (the installation
directory and the current working directory) with an explicit object
passed to every component. ToolchainConfig pins the generator
invocations; it only carries defaults and is never read from disk.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


def default_install_root() -> Path:
    """Return the directory noisekit is installed in."""
    return Path(__file__).resolve().parent.parent


class ScaffoldContext(BaseModel):
    """Paths shared by the planner, the runner, and post-processing."""

    model_config = {"extra": "forbid", "frozen": True}

    project_name: str
    install_root: Path = Field(default_factory=default_install_root)
    working_dir: Path = Field(default_factory=Path.cwd)

    @property
    def project_path(self) -> Path:
        return self.working_dir / self.project_name

    @property
    def templates_dir(self) -> Path:
        return self.install_root / "scaffold" / "templates"


class ToolchainConfig(BaseModel):
    """Pinned versions and fixed arguments for the external generators."""

    model_config = {"extra": "forbid"}

    sv: str = "sv@0.6.18"
    shadcn_svelte: str = "shadcn-svelte@next"
    package_manager: str = "npm"
    template: str = "minimal"
    tailwind_plugins: list[str] = Field(default_factory=lambda: ["typography"])
    shadcn_components: list[str] = Field(
        default_factory=lambda: [
            "button",
            "input",
            "textarea",
            "label",
            "select",
            "checkbox",
            "radio-group",
            "card",
            "separator",
            "dialog",
            "aspect-ratio",
            "sidebar",
        ]
    )
