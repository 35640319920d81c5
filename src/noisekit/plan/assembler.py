"""Turn a ProjectRequest into an ordered task list and a summary.

Order matters: every task after ``create-project`` runs inside the
directory it creates, add-ons are registered with ``--no-install``,
and a final ``npm install`` pulls in everything they added.
"""

from __future__ import annotations

from noisekit.models.config import ScaffoldContext, ToolchainConfig
from noisekit.models.request import ProjectRequest
from noisekit.models.task import ExecutionMode, TaskSpec
from noisekit.plan.packages import package_config


def package_tasks(
    request: ProjectRequest,
    ctx: ScaffoldContext,
    toolchain: ToolchainConfig | None = None,
) -> list[TaskSpec]:
    """Build one install task per selected package, in menu order."""
    toolchain = toolchain or ToolchainConfig()
    tasks: list[TaskSpec] = []
    for package in request.selected_packages():
        config = package_config(package)
        tasks.append(
            TaskSpec(
                key=f"install-{package.value}",
                title=config.description,
                argv=config.argv(toolchain),
                cwd=ctx.project_path,
                success_message=f"{package.label} added",
            )
        )
    return tasks


def build_plan(
    request: ProjectRequest,
    ctx: ScaffoldContext,
    toolchain: ToolchainConfig | None = None,
) -> list[TaskSpec]:
    """Assemble the full ordered task list for a request.

    Args:
        request: Validated answers from the wizard.
        ctx: Paths for this run; ``ctx.project_name`` must match the request.
        toolchain: Generator pins. Defaults to ToolchainConfig().

    Returns:
        Tasks in execution order.
    """
    if ctx.project_name != request.name:
        raise ValueError(
            f"Context is for '{ctx.project_name}' but request is for '{request.name}'"
        )
    toolchain = toolchain or ToolchainConfig()
    project = ctx.project_path
    sv = ["npx", toolchain.sv]

    tasks = [
        TaskSpec(
            key="create-project",
            title="Creating SvelteKit project",
            argv=sv
            + [
                "create",
                request.name,
                "--template",
                toolchain.template,
                "--types",
                "ts",
                "--no-add-ons",
                "--install",
                toolchain.package_manager,
            ],
            cwd=ctx.working_dir,
            success_message="SvelteKit project created successfully!",
        )
    ]

    tasks.extend(package_tasks(request, ctx, toolchain))

    if request.adapter is not None:
        tasks.append(
            TaskSpec(
                key="setup-adapter",
                title=f"Configuring {request.adapter.label.lower()} adapter",
                argv=sv
                + ["add", f"--sveltekit-adapter=adapter:{request.adapter.value}", "--no-install"],
                cwd=project,
                success_message=f"adapter-{request.adapter.value} configured",
            )
        )

    if request.orm is not None:
        orm = request.orm
        options = f"database:{orm.database.value}+client:{orm.client.value}"
        if orm.database.supports_docker:
            options += f"+docker:{'yes' if orm.docker else 'no'}"
        tasks.append(
            TaskSpec(
                key="setup-drizzle",
                title="Setting up Drizzle ORM",
                argv=sv + ["add", f"--drizzle={options}", "--no-install"],
                cwd=project,
                success_message="Drizzle ORM configured successfully!",
            )
        )

    plugins = "+".join(toolchain.tailwind_plugins)
    tailwind_flag = f"--tailwindcss={plugins}" if plugins else "--tailwindcss"
    tasks.append(
        TaskSpec(
            key="setup-tailwind",
            title="Setting up Tailwind CSS",
            argv=sv + ["add", tailwind_flag, "--no-install"],
            cwd=project,
            success_message="Tailwind CSS configured successfully!",
        )
    )

    if request.shadcn:
        shadcn = ["npx", toolchain.shadcn_svelte]
        tasks.append(
            TaskSpec(
                key="init-shadcn",
                title="Initializing shadcn-svelte",
                argv=shadcn + ["init"],
                cwd=project,
                mode=ExecutionMode.interactive,
                success_message="shadcn-svelte initialized successfully!",
            )
        )
        if toolchain.shadcn_components:
            tasks.append(
                TaskSpec(
                    key="add-shadcn-components",
                    title="Installing UI components",
                    argv=shadcn + ["add", "-y", *toolchain.shadcn_components],
                    cwd=project,
                    success_message="UI components installed successfully!",
                )
            )

    tasks.append(
        TaskSpec(
            key="finalize",
            title="Finalizing project setup",
            argv=[toolchain.package_manager, "install"],
            cwd=project,
            success_message="All dependencies installed successfully!",
        )
    )
    return tasks


def describe_adapter(request: ProjectRequest) -> str:
    if request.adapter is None:
        return "adapter-auto"
    return f"adapter-{request.adapter.value}"


def describe_orm(request: ProjectRequest) -> str:
    if request.orm is None:
        return "None"
    orm = request.orm
    text = f"Drizzle ({orm.database.value} via {orm.client.value})"
    if orm.docker:
        text += " with Docker"
    return text


def describe_packages(request: ProjectRequest) -> str:
    selected = request.selected_packages()
    if not selected:
        return "None"
    return ", ".join(f"{pkg.label} ({pkg.value})" for pkg in selected)


def render_summary(request: ProjectRequest) -> str:
    """Render the pre-confirmation summary as plain text lines."""
    lines = [
        f"Project Name: {request.name}",
        f"Adapter: {describe_adapter(request)}",
        f"ORM: {describe_orm(request)}",
        f"shadcn-svelte: {'Yes' if request.shadcn else 'No'}",
        f"Additional Packages: {describe_packages(request)}",
    ]
    return "\n".join(lines)
