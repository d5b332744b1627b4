"""Root component template written over the generated app.html."""

import os

from ngscaffold.config import ScaffoldConfig
from ngscaffold.templates.template_renderer import render_template

BRAND = "Angular + Bootstrap + Font Awesome"
HEADING = "Your app is ready"
LEAD = "Bootstrap styles and Font Awesome icons are wired into angular.json."


def render_app_template(config: ScaffoldConfig) -> str:
    return render_template(
        config.app_template_name,
        package=__package__,
        brand=BRAND,
        heading=HEADING,
        lead=LEAD,
        packages=config.ui_packages,
    )


def write_app_template(project_dir: str, config: ScaffoldConfig) -> str:
    """Overwrite the root component template, creating its directory if needed.

    Returns the path written.
    """
    path = os.path.join(project_dir, config.app_template_file)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(render_app_template(config))
    return path
