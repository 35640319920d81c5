"""Package menu table: each auxiliary package maps to exactly one command.

The table is total over Package; a missing entry fails at import time
rather than being silently skipped at plan time.
"""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from noisekit.models.config import ToolchainConfig
from noisekit.models.request import Package


class PackageConfig(BaseModel):
    """How to install one auxiliary package.

    Exactly one of ``sv_addon`` (installed through ``sv add``) or
    ``dev_dependency`` (installed with the package manager) is set.
    """

    model_config = {"extra": "forbid", "frozen": True}

    description: str
    sv_addon: str | None = None
    dev_dependency: str | None = None

    @model_validator(mode="after")
    def _exactly_one_source(self) -> PackageConfig:
        if (self.sv_addon is None) == (self.dev_dependency is None):
            raise ValueError("PackageConfig needs exactly one of sv_addon or dev_dependency")
        return self

    def argv(self, toolchain: ToolchainConfig) -> list[str]:
        if self.sv_addon is not None:
            return ["npx", toolchain.sv, "add", self.sv_addon, "--no-install"]
        return [toolchain.package_manager, "install", "-D", self.dev_dependency]


PACKAGE_CONFIGS: dict[Package, PackageConfig] = {
    Package.eslint: PackageConfig(description="Adding ESLint", sv_addon="eslint"),
    Package.prettier: PackageConfig(description="Adding Prettier", sv_addon="prettier"),
    Package.playwright: PackageConfig(
        description="Adding Playwright browser testing", sv_addon="playwright"
    ),
    Package.vitest: PackageConfig(description="Adding Vitest unit testing", sv_addon="vitest"),
    Package.svelte_seo: PackageConfig(
        description="Installing svelte-seo", dev_dependency="svelte-seo"
    ),
}

_missing = [pkg.value for pkg in Package if pkg not in PACKAGE_CONFIGS]
if _missing:
    raise RuntimeError(f"No package configuration for: {', '.join(_missing)}")


def package_config(package: Package) -> PackageConfig:
    """Look up the install configuration for a package."""
    return PACKAGE_CONFIGS[package]
