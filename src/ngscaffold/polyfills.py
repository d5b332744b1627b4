"""Strip zone.js imports from a generated polyfills file."""

import os
import re


def import_line_pattern(package: str) -> "re.Pattern[str]":
    """Match whole lines importing *package* or one of its subpaths, e.g. ``import 'zone.js/testing';``."""
    return re.compile(
        r"^[ \t]*import\s+(['\"])" + re.escape(package) + r"(?:/[^'\"]*)?\1[ \t]*;?[ \t]*(?://[^\r\n]*)?(?:\r?\n|$)",
        re.MULTILINE,
    )


def strip_imports(text: str, package: str) -> str:
    return import_line_pattern(package).sub("", text)


def patch_polyfills(path: str, package: str) -> bool:
    """Remove every import of *package* from the file at *path*.

    Returns False without touching anything when the file does not exist.
    The file is only rewritten when its content changes.
    """
    if not os.path.isfile(path):
        return False

    with open(path, encoding="utf-8", newline="") as f:
        original = f.read()

    patched = strip_imports(original, package)
    if patched != original:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(patched)
    return True
