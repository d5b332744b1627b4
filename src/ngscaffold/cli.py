"""Click entry point for ng-b-fa-new."""

import sys

import click

from ngscaffold.config import DEFAULT_MAX_OLD_SPACE_SIZE, ChildEnvironment
from ngscaffold.crash_handler import install_crash_handlers
from ngscaffold.orchestrator import USAGE, ScaffoldOrchestrator
from ngscaffold.process_runner import ProcessRunner
from ngscaffold.scaffold_opts import ScaffoldOpts


@click.command("ng-b-fa-new", context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--no-standalone", is_flag=True,
              help="Generate an NgModule-based project instead of standalone components")
@click.option("--no-serve", is_flag=True,
              help="Stop after setup instead of starting the development server")
@click.option("--allow-analytics-failure", is_flag=True,
              help="Warn and continue if disabling Angular CLI analytics fails")
@click.option("--max-old-space-size", type=int, default=DEFAULT_MAX_OLD_SPACE_SIZE,
              envvar="NG_B_FA_NEW_MAX_OLD_SPACE_SIZE", show_default=True,
              help="Node.js heap limit in MB for every spawned tool")
def main(**kwargs):
    """Create an Angular project with Bootstrap and Font Awesome and serve it.

    The first argument is the project name; anything after it is ignored.
    """
    install_crash_handlers()
    opts = ScaffoldOpts(**kwargs)
    if opts.project_name is None:
        click.echo(USAGE, err=True)
        sys.exit(1)

    runner = ProcessRunner(ChildEnvironment(max_old_space_size=opts.max_old_space_size))
    sys.exit(ScaffoldOrchestrator(runner).run(opts.project_name, opts.flags))
