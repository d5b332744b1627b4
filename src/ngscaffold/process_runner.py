"""ProcessRunner: spawns the external tools (npx, npm) with the forced child environment."""

import os
import subprocess
import sys
from dataclasses import dataclass
from typing import List

from ngscaffold.config import ChildEnvironment
from ngscaffold.managed_subprocess import ManagedSubprocess

COMMAND_NOT_FOUND_EXIT_CODE = 127


@dataclass
class CommandResult:
    """Outcome of one external command."""
    cmd: List[str]
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


def _echo_command(cmd: List[str]) -> None:
    print(f"\n> {' '.join(cmd)}", flush=True)


def _report_missing_executable(cmd: List[str]) -> CommandResult:
    print(f"Error: command not found: {cmd[0]}", file=sys.stderr)
    return CommandResult(cmd=cmd, returncode=COMMAND_NOT_FOUND_EXIT_CODE)


class ProcessRunner:
    """Runs commands one at a time, inheriting the terminal.

    Every child gets os.environ merged with *environment*; nothing is
    captured, so npm and the Angular CLI print their own progress.
    """

    def __init__(self, environment: ChildEnvironment, base_env=None):
        self._environment = environment
        self._base_env = base_env

    def child_env(self):
        base = os.environ if self._base_env is None else self._base_env
        return self._environment.merged_with(base)

    def run(self, cmd: List[str], cwd: str) -> CommandResult:
        """Run *cmd* in *cwd* and wait for it to exit."""
        _echo_command(cmd)
        try:
            result = subprocess.run(cmd, cwd=cwd, env=self.child_env())
        except FileNotFoundError:
            return _report_missing_executable(cmd)
        return CommandResult(cmd=cmd, returncode=result.returncode)

    def run_foreground(self, cmd: List[str], cwd: str, label: str = "dev server",
                       terminate_timeout: float = 5.0) -> CommandResult:
        """Run a long-lived command until it exits or the user interrupts it.

        Returns 130 when interrupted with Ctrl+C. SIGTERM or SIGHUP stop the
        command and then raise SystemExit(128 + signal number).
        """
        _echo_command(cmd)
        try:
            process = subprocess.Popen(
                cmd, cwd=cwd, env=self.child_env(), start_new_session=True,
            )
        except FileNotFoundError:
            return _report_missing_executable(cmd)

        with ManagedSubprocess(process, label=label, terminate_timeout=terminate_timeout) as managed:
            process.wait()

        return CommandResult(cmd=cmd, returncode=managed.returncode)
