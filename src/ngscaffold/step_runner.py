"""StepRunner: executes steps in order and stops at the first fatal failure."""

from dataclasses import dataclass, field
from typing import List, Optional

from ngscaffold.diagnostics import print_failure_diagnostics, print_step_warning
from ngscaffold.errors import ScaffoldError


@dataclass
class RunOutcome:
    completed: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[ScaffoldError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class StepRunner:
    """Runs each step against a shared context.

    A ScaffoldError from a fatal step is reported and ends the run; from a
    non-fatal step it is reported as a warning and the run carries on.
    Any other exception propagates.
    """

    def __init__(self, steps, report_failure=print_failure_diagnostics, report_warning=print_step_warning):
        self._steps = list(steps)
        self._report_failure = report_failure
        self._report_warning = report_warning

    @property
    def step_names(self) -> List[str]:
        return [step.name for step in self._steps]

    def run(self, ctx) -> RunOutcome:
        outcome = RunOutcome()
        for step in self._steps:
            try:
                step.action(ctx)
            except ScaffoldError as e:
                if step.fatal:
                    self._report_failure(step.name, e, ctx.project_dir)
                    outcome.failed_step = step.name
                    outcome.error = e
                    return outcome
                self._report_warning(step.name, e)
                outcome.warnings.append(step.name)
                continue
            outcome.completed.append(step.name)
        return outcome
