"""ScaffoldOrchestrator: validates the project name and drives the scaffold steps."""

import os
import sys

from ngscaffold.config import ScaffoldConfig
from ngscaffold.errors import InvalidArgument
from ngscaffold.step_runner import StepRunner
from ngscaffold.steps import ScaffoldContext, build_steps

NO_STANDALONE_FLAG = "--no-standalone"
NO_SERVE_FLAG = "--no-serve"
ALLOW_ANALYTICS_FAILURE_FLAG = "--allow-analytics-failure"
USAGE = "Usage: ng-b-fa-new <project-name> [--no-standalone] [--no-serve] [--allow-analytics-failure]"

# Values a wrapping script produces when it forgets to set its variable.
_PLACEHOLDER_NAMES = ("undefined", "null")


def validate_project_name(project_name) -> str:
    """Return the trimmed project name.

    Raises:
        InvalidArgument: If the name is missing, blank, or a placeholder.
    """
    name = (project_name or "").strip()
    if not name:
        raise InvalidArgument("project name is required")
    if name in _PLACEHOLDER_NAMES:
        raise InvalidArgument(f"'{name}' is not a valid project name")
    return name


def print_next_steps(project_name):
    print("\nSetup complete! Run the following commands:")
    print(f"\n   cd {project_name}")
    print("   ng serve\n")


class ScaffoldOrchestrator:
    """Creates an Angular project with Bootstrap and Font Awesome, then serves it."""

    def __init__(self, runner, config=None, base_dir=None):
        self.runner = runner
        self.config = config or ScaffoldConfig()
        self.base_dir = base_dir

    def run(self, project_name, flags=frozenset()) -> int:
        """Scaffold *project_name* and return the process exit code.

        Unrecognised flags are ignored.
        """
        try:
            name = validate_project_name(project_name)
        except InvalidArgument as e:
            print(f"Error: {e}", file=sys.stderr)
            print(USAGE, file=sys.stderr)
            return e.exit_code

        serve = NO_SERVE_FLAG not in flags
        ctx = ScaffoldContext(
            project_name=name,
            base_dir=self.base_dir or os.getcwd(),
            runner=self.runner,
            config=self.config,
            standalone=NO_STANDALONE_FLAG not in flags,
        )

        print(f"\nCreating Angular project: {name}\n")
        steps = build_steps(
            serve=serve,
            analytics_advisory=ALLOW_ANALYTICS_FAILURE_FLAG in flags,
        )
        outcome = StepRunner(steps).run(ctx)
        if not outcome.succeeded:
            return outcome.error.exit_code

        if not serve:
            print_next_steps(name)
        return ctx.exit_code
