"""The scaffold steps, in the order they run."""

import os
from dataclasses import dataclass, field
from typing import Callable, List

from ngscaffold.angular_json import patch_angular_json
from ngscaffold.app_template import write_app_template
from ngscaffold.config import ScaffoldConfig
from ngscaffold.errors import (
    DirectoryNotFound,
    GenerationFailed,
    InstallFailed,
    StepFailed,
)
from ngscaffold.polyfills import patch_polyfills


@dataclass
class ScaffoldContext:
    """State threaded through every step.

    ``base_dir`` is where the project is generated; every later step works
    in ``project_dir`` explicitly instead of changing the process directory.
    """
    project_name: str
    base_dir: str
    runner: object
    config: ScaffoldConfig = field(default_factory=ScaffoldConfig)
    standalone: bool = True
    exit_code: int = 0

    @property
    def project_dir(self) -> str:
        return os.path.join(self.base_dir, self.project_name)

    def project_path(self, relative: str) -> str:
        return os.path.join(self.project_dir, relative)


@dataclass(frozen=True)
class Step:
    """A named action.

    A fatal step's failure ends the run before any later step starts. A
    non-fatal step's failure is reported as a warning and the run carries on.
    """
    name: str
    action: Callable[[ScaffoldContext], None]
    fatal: bool = True


def _run_in_project(ctx: ScaffoldContext, cmd: List[str], error_cls, what: str):
    result = ctx.runner.run(cmd, cwd=ctx.project_dir)
    if not result.succeeded:
        raise error_cls(f"{what} exited with code {result.returncode}", command=cmd)


def generate_project(ctx: ScaffoldContext):
    cmd = ctx.config.generate_command(ctx.project_name, standalone=ctx.standalone)
    result = ctx.runner.run(cmd, cwd=ctx.base_dir)
    if not result.succeeded:
        raise GenerationFailed(f"project generator exited with code {result.returncode}", command=cmd)
    if not os.path.isdir(ctx.project_dir):
        raise GenerationFailed(
            "project generator reported success but created no project directory",
            path=ctx.project_dir,
        )


def enter_project(ctx: ScaffoldContext):
    if not os.path.isdir(ctx.project_dir):
        raise DirectoryNotFound("project directory does not exist", path=ctx.project_dir)
    print(f"Working in {ctx.project_dir}")


def disable_analytics(ctx: ScaffoldContext):
    _run_in_project(ctx, list(ctx.config.analytics_command), StepFailed, "analytics toggle")


def install_dependencies(ctx: ScaffoldContext):
    _run_in_project(ctx, ctx.config.install_command(), InstallFailed, "dependency install")


def install_ui_packages(ctx: ScaffoldContext):
    _run_in_project(
        ctx, ctx.config.install_command(ctx.config.ui_packages), InstallFailed, "UI package install",
    )


def remove_runtime_package(ctx: ScaffoldContext):
    package = ctx.config.runtime_package
    _run_in_project(ctx, ctx.config.uninstall_command(package), StepFailed, f"uninstall of {package}")


def strip_polyfill_imports(ctx: ScaffoldContext):
    path = ctx.project_path(ctx.config.polyfills_file)
    try:
        found = patch_polyfills(path, ctx.config.runtime_package)
    except (OSError, UnicodeError) as e:
        raise StepFailed(f"could not rewrite polyfills: {e}", path=path) from e
    if found:
        print(f"Removed {ctx.config.runtime_package} imports from {ctx.config.polyfills_file}")


def add_global_styles(ctx: ScaffoldContext):
    path = ctx.project_path(ctx.config.build_config_file)
    try:
        added = patch_angular_json(path, ctx.project_name, ctx.config.style_sheets)
    except (OSError, UnicodeError) as e:
        raise StepFailed(f"could not update build configuration: {e}", path=path) from e
    for style in added:
        print(f"Added style {style}")


def replace_app_template(ctx: ScaffoldContext):
    try:
        path = write_app_template(ctx.project_dir, ctx.config)
    except (OSError, UnicodeError) as e:
        raise StepFailed(
            f"could not write app template: {e}",
            path=ctx.project_path(ctx.config.app_template_file),
        ) from e
    print(f"Wrote {os.path.relpath(path, ctx.project_dir)}")


def serve_project(ctx: ScaffoldContext):
    print("\nSetup complete. Starting the development server...")
    result = ctx.runner.run_foreground(
        list(ctx.config.serve_command),
        cwd=ctx.project_dir,
        terminate_timeout=ctx.config.serve_terminate_timeout,
    )
    ctx.exit_code = result.returncode


def build_steps(serve: bool = True, analytics_advisory: bool = False) -> List[Step]:
    """Every step is fatal unless *analytics_advisory* downgrades the analytics toggle to a warning."""
    steps = [
        Step("generate", generate_project),
        Step("enter-project", enter_project),
        Step("disable-analytics", disable_analytics, fatal=not analytics_advisory),
        Step("install", install_dependencies),
        Step("install-ui-packages", install_ui_packages),
        Step("remove-zone-js", remove_runtime_package),
        Step("patch-polyfills", strip_polyfill_imports),
        Step("patch-angular-json", add_global_styles),
        Step("write-app-template", replace_app_template),
    ]
    if serve:
        steps.append(Step("serve", serve_project))
    return steps
