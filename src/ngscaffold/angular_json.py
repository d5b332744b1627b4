"""Add global stylesheets to a project's build options in angular.json."""

import json
import os
import stat
import tempfile
from typing import Iterable, List

from ngscaffold.config import StyleSheet
from ngscaffold.errors import StepFailed


def _style_input(entry) -> str:
    # Entries are either plain paths or {"input": path, "bundleName": ...} objects.
    if isinstance(entry, dict):
        return str(entry.get("input", ""))
    return str(entry)


def build_options(document: dict, project_name: str) -> dict:
    """Return the mutable build-options node for *project_name*.

    Raises:
        KeyError: If the project or its build target is missing.
    """
    project = document["projects"][project_name]
    return project["architect"]["build"]["options"]


def add_styles(document: dict, project_name: str, style_sheets: Iterable[StyleSheet]) -> List[str]:
    """Append each stylesheet unless an existing entry already mentions its package.

    Returns the paths that were added, in order.
    """
    options = build_options(document, project_name)
    styles = options.setdefault("styles", [])

    added = []
    for sheet in style_sheets:
        if any(sheet.marker in _style_input(entry) for entry in styles):
            continue
        styles.append(sheet.path)
        added.append(sheet.path)
    return added


def dump(document: dict) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_atomically(path: str, text: str) -> None:
    """Replace *path* with *text* so readers see either the old or the new file, never a partial one."""
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(prefix=f".{os.path.basename(path)}.", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if os.path.exists(path):
            os.chmod(tmp_path, stat.S_IMODE(os.stat(path).st_mode))
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def patch_angular_json(path: str, project_name: str, style_sheets: Iterable[StyleSheet]) -> List[str]:
    """Read *path*, add the stylesheets for *project_name*, and write it back."""
    if not os.path.isfile(path):
        raise StepFailed("build configuration not found", path=path)

    try:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)
    except UnicodeDecodeError as e:
        raise StepFailed(f"build configuration is not valid UTF-8: {e}", path=path) from e
    except json.JSONDecodeError as e:
        raise StepFailed(f"build configuration is not valid JSON: {e}", path=path) from e

    try:
        added = add_styles(document, project_name, style_sheets)
    except (KeyError, TypeError) as e:
        raise StepFailed(
            f"no build options for project '{project_name}' in build configuration",
            path=path,
        ) from e

    write_atomically(path, dump(document))
    return added
