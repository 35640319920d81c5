"""Rewrites applied to the generated project after all tasks succeed.

The static adapter needs a root layout that enables prerendering, and
every project gets a README rendered from the bundled template.
"""

from __future__ import annotations

import logging
from pathlib import Path

from noisekit.models.config import ScaffoldContext
from noisekit.models.request import Adapter, ProjectRequest
from noisekit.plan.assembler import describe_adapter

logger = logging.getLogger(__name__)

LAYOUT_PATH = Path("src") / "routes" / "+layout.ts"
STATIC_LAYOUT = "export const prerender = true;\nexport const trailingSlash = 'always';\n"

README_TEMPLATE = "README.md"

_DRIZZLE_DOCKER_STEP = """\
Start the database container:

```bash
npm run db:start
```

"""


def write_static_layout(project_path: Path) -> Path:
    """Overwrite the root layout so every route is prerendered.

    The existing file, if any, is replaced rather than merged.
    """
    target = project_path / LAYOUT_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(STATIC_LAYOUT, encoding="utf-8")
    logger.debug("Wrote static layout to %s", target)
    return target


def drizzle_section(request: ProjectRequest) -> str:
    if request.orm is None:
        return ""
    orm = request.orm
    section = (
        "## Database\n\n"
        f"This project uses Drizzle ORM with {orm.database.value} "
        f"(`{orm.client.value}` client).\n\n"
        "Set `DATABASE_URL` in `.env`, then:\n\n"
    )
    if orm.docker:
        section += _DRIZZLE_DOCKER_STEP
    section += "Push the schema:\n\n```bash\nnpm run db:push\n```\n"
    return section


def packages_section(request: ProjectRequest) -> str:
    selected = request.selected_packages()
    if not selected:
        return ""
    lines = ["## Additional packages", ""]
    lines.extend(f"- {pkg.label} (`{pkg.value}`)" for pkg in selected)
    return "\n".join(lines) + "\n"


def render_readme(template: str, request: ProjectRequest) -> str:
    """Substitute every placeholder occurrence in a README template.

    Optional sections render as empty strings when the feature was not
    selected.
    """
    replacements = {
        "{{PROJECT_NAME}}": request.name,
        "{{ADAPTER}}": describe_adapter(request),
        "{{DRIZZLE_SETUP}}": drizzle_section(request),
        "{{ADDITIONAL_PACKAGES}}": packages_section(request),
    }
    rendered = template
    for token, value in replacements.items():
        rendered = rendered.replace(token, value)
    return rendered


def write_readme(ctx: ScaffoldContext, request: ProjectRequest) -> Path:
    """Render the bundled template over the project's README.md.

    Raises:
        OSError: If the template cannot be read or the README written.
    """
    template_path = ctx.templates_dir / README_TEMPLATE
    template = template_path.read_text(encoding="utf-8")
    target = ctx.project_path / "README.md"
    target.write_text(render_readme(template, request), encoding="utf-8")
    logger.debug("Wrote README from %s to %s", template_path, target)
    return target


def post_process(ctx: ScaffoldContext, request: ProjectRequest) -> list[str]:
    """Apply all applicable rewrites and return the paths touched.

    Returns:
        Paths relative to the project directory.
    """
    written: list[str] = []
    if request.adapter is Adapter.static:
        write_static_layout(ctx.project_path)
        written.append(LAYOUT_PATH.as_posix())
    write_readme(ctx, request)
    written.append("README.md")
    return written
