"""noisekit data models - re-exports all public model classes."""

from noisekit.models.config import ScaffoldContext, ToolchainConfig
from noisekit.models.request import (
    CLIENTS_BY_DATABASE,
    Adapter,
    Database,
    DatabaseClient,
    OrmConfig,
    Package,
    ProjectRequest,
    validate_project_name,
)
from noisekit.models.task import ExecutionMode, TaskSpec

__all__ = [
    "CLIENTS_BY_DATABASE",
    "Adapter",
    "Database",
    "DatabaseClient",
    "ExecutionMode",
    "OrmConfig",
    "Package",
    "ProjectRequest",
    "ScaffoldContext",
    "TaskSpec",
    "ToolchainConfig",
    "validate_project_name",
]
