"""Failure report printed when a scaffold step fails."""

import os
import platform
import sys
from typing import List, Optional, Tuple


def environment_facts(project_dir: Optional[str] = None) -> List[Tuple[str, str]]:
    facts = [("Current directory", os.getcwd())]
    if project_dir:
        facts.append(("Project directory", project_dir))
    facts.append(("Python", platform.python_version()))
    facts.append(("Operating system", platform.platform()))
    return facts


def print_failure_diagnostics(step_name, error, project_dir=None):
    """Print which step failed, what it was running, and where."""
    print(f"\nError: step '{step_name}' failed: {error}", file=sys.stderr)
    if error.context:
        print(f"  {error.context}", file=sys.stderr)
    for label, value in environment_facts(project_dir):
        print(f"  {label}: {value}", file=sys.stderr)


def print_step_warning(step_name, error):
    print(f"Warning: step '{step_name}' failed, continuing: {error}", file=sys.stderr)
