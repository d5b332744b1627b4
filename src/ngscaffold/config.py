"""Fixed configuration for scaffolding an Angular + Bootstrap + Font Awesome project."""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple

DEFAULT_MAX_OLD_SPACE_SIZE = 4096


@dataclass(frozen=True)
class StyleSheet:
    """A global stylesheet added to the build, plus the substring that identifies its package."""
    path: str
    marker: str


@dataclass(frozen=True)
class ChildEnvironment:
    """Environment variables forced onto every spawned child process.

    The parent's os.environ is never modified; each child gets a merged copy.
    """

    analytics: str = "false"
    max_old_space_size: int = DEFAULT_MAX_OLD_SPACE_SIZE

    def variables(self) -> Dict[str, str]:
        return {
            "NG_CLI_ANALYTICS": self.analytics,
            "NODE_OPTIONS": f"--max-old-space-size={self.max_old_space_size}",
        }

    def merged_with(self, base: Mapping[str, str]) -> Dict[str, str]:
        """Return a copy of *base* with the forced variables applied on top."""
        env = dict(base)
        env.update(self.variables())
        return env


_DEFAULT_STYLE_SHEETS = (
    StyleSheet("node_modules/bootstrap/dist/css/bootstrap.min.css", "bootstrap"),
    StyleSheet(
        "node_modules/@fortawesome/fontawesome-free/css/all.min.css",
        "@fortawesome/fontawesome-free",
    ),
)


@dataclass(frozen=True)
class ScaffoldConfig:
    """Commands, packages and file locations used by the scaffold steps."""

    generator: Tuple[str, ...] = ("npx", "@angular/cli@latest", "new")
    generator_options: Tuple[str, ...] = (
        "--style=scss",
        "--routing",
        "--skip-install",
        "--ssr=false",
        "--skip-git",
    )
    module_option: str = "--standalone=false"
    analytics_command: Tuple[str, ...] = ("npx", "ng", "analytics", "disable")
    package_manager: str = "npm"
    ui_packages: Tuple[str, ...] = ("bootstrap", "@fortawesome/fontawesome-free")
    runtime_package: str = "zone.js"
    style_sheets: Tuple[StyleSheet, ...] = field(default=_DEFAULT_STYLE_SHEETS)
    build_config_file: str = "angular.json"
    polyfills_file: str = os.path.join("src", "polyfills.ts")
    app_template_file: str = os.path.join("src", "app", "app.html")
    app_template_name: str = "app.html.j2"
    serve_command: Tuple[str, ...] = ("npx", "ng", "serve", "--open")
    serve_terminate_timeout: float = 5.0

    def generate_command(self, project_name: str, standalone: bool = True) -> List[str]:
        cmd = list(self.generator) + [project_name] + list(self.generator_options)
        if not standalone:
            cmd.append(self.module_option)
        return cmd

    def install_command(self, packages=()) -> List[str]:
        return [self.package_manager, "install"] + list(packages)

    def uninstall_command(self, package: str) -> List[str]:
        return [self.package_manager, "uninstall", package]
