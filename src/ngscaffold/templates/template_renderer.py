"""Load and render Jinja2 templates shipped in a package's templates directory."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Load a Jinja2 template by name and render it with the given arguments.

    Args:
        template_name: Template filename (e.g. "app.html.j2")
        package: The caller's package (pass __package__). Templates are loaded
            from a ``templates`` directory beneath it.
        **kwargs: Template variables.

    Returns:
        The rendered text, trailing newline preserved.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    env = jinja2.Environment(keep_trailing_newline=True, undefined=jinja2.StrictUndefined)
    return env.from_string(source).render(**kwargs)
