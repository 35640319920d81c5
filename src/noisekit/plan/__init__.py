"""Plan assembly: request -> ordered tasks and summary."""

from noisekit.plan.assembler import build_plan, package_tasks, render_summary
from noisekit.plan.packages import PACKAGE_CONFIGS, PackageConfig, package_config

__all__ = [
    "PACKAGE_CONFIGS",
    "PackageConfig",
    "build_plan",
    "package_config",
    "package_tasks",
    "render_summary",
]
