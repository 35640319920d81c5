"""Project request models built from the wizard's answers.

A ProjectRequest is created once per run, consumed by the plan
assembler, and discarded. Validation here mirrors the interactive
prompt checks so a request can never carry an unusable name or an
inconsistent ORM configuration.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from noisekit.errors import ProjectNameError

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def validate_project_name(value: str) -> str:
    """Check a project name and return it unchanged.

    Raises:
        ProjectNameError: If the name is empty, contains whitespace, or
            contains characters outside ``[A-Za-z0-9_-]``.
    """
    if not value:
        raise ProjectNameError(value, "Please enter a project name.")
    if any(ch.isspace() for ch in value):
        raise ProjectNameError(value, "Project name cannot contain spaces.")
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        raise ProjectNameError(
            value,
            "Project name can only include alphanumeric characters, "
            "hyphens, and underscores.",
        )
    return value


class Adapter(str, Enum):
    """SvelteKit deployment adapter."""

    node = "node"
    static = "static"

    @property
    def label(self) -> str:
        return _ADAPTER_LABELS[self]


_ADAPTER_LABELS: dict[Adapter, str] = {
    Adapter.node: "Node server",
    Adapter.static: "Static site",
}


class Database(str, Enum):
    """Database engine offered by the Drizzle add-on."""

    postgresql = "postgresql"
    mysql = "mysql"
    sqlite = "sqlite"

    @property
    def supports_docker(self) -> bool:
        return self in (Database.postgresql, Database.mysql)


class DatabaseClient(str, Enum):
    """Driver library used by Drizzle to reach the database."""

    postgres_js = "postgres.js"
    neon = "neon"
    mysql2 = "mysql2"
    planetscale = "planetscale"
    better_sqlite3 = "better-sqlite3"
    libsql = "libsql"
    turso = "turso"


CLIENTS_BY_DATABASE: dict[Database, tuple[DatabaseClient, ...]] = {
    Database.postgresql: (DatabaseClient.postgres_js, DatabaseClient.neon),
    Database.mysql: (DatabaseClient.mysql2, DatabaseClient.planetscale),
    Database.sqlite: (
        DatabaseClient.better_sqlite3,
        DatabaseClient.libsql,
        DatabaseClient.turso,
    ),
}


class Package(str, Enum):
    """Auxiliary package, declared in menu order."""

    eslint = "eslint"
    prettier = "prettier"
    playwright = "playwright"
    vitest = "vitest"
    svelte_seo = "svelte-seo"

    @property
    def label(self) -> str:
        return _PACKAGE_LABELS[self]


_PACKAGE_LABELS: dict[Package, str] = {
    Package.eslint: "ESLint",
    Package.prettier: "Prettier",
    Package.playwright: "Playwright",
    Package.vitest: "Vitest",
    Package.svelte_seo: "SEO Support",
}


class OrmConfig(BaseModel):
    """Drizzle ORM configuration chosen through the nested prompts."""

    model_config = {"extra": "forbid", "frozen": True}

    database: Database
    client: DatabaseClient
    docker: bool = False

    @model_validator(mode="after")
    def _check_combination(self) -> OrmConfig:
        valid = CLIENTS_BY_DATABASE[self.database]
        if self.client not in valid:
            allowed = ", ".join(c.value for c in valid)
            raise ValueError(
                f"Client '{self.client.value}' is not available for "
                f"{self.database.value} (expected one of: {allowed})"
            )
        if self.docker and not self.database.supports_docker:
            raise ValueError(f"Docker is not offered for {self.database.value}")
        return self


class ProjectRequest(BaseModel):
    """Everything the user asked for in one wizard session."""

    model_config = {"extra": "forbid"}

    name: str
    adapter: Adapter | None = None
    orm: OrmConfig | None = None
    shadcn: bool = False
    packages: set[Package] = Field(default_factory=set)

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)

    def selected_packages(self) -> list[Package]:
        """Return the selected packages in menu order."""
        return [pkg for pkg in Package if pkg in self.packages]
