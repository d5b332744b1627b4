"""Options dataclass for the scaffold command."""

from dataclasses import dataclass, field
from typing import Tuple

from ngscaffold.config import DEFAULT_MAX_OLD_SPACE_SIZE
from ngscaffold.orchestrator import (
    ALLOW_ANALYTICS_FAILURE_FLAG,
    NO_SERVE_FLAG,
    NO_STANDALONE_FLAG,
)


@dataclass
class ScaffoldOpts:
    """All options for the scaffold command."""

    args: Tuple[str, ...] = field(default_factory=tuple)
    no_standalone: bool = False
    no_serve: bool = False
    allow_analytics_failure: bool = False
    max_old_space_size: int = DEFAULT_MAX_OLD_SPACE_SIZE

    @property
    def project_name(self):
        return self.args[0] if self.args else None

    @property
    def flags(self) -> frozenset:
        flags = set()
        if self.no_standalone:
            flags.add(NO_STANDALONE_FLAG)
        if self.no_serve:
            flags.add(NO_SERVE_FLAG)
        if self.allow_analytics_failure:
            flags.add(ALLOW_ANALYTICS_FAILURE_FLAG)
        return frozenset(flags)
