# compliance/models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from utils.errors import TagCheckError


class RunState(Enum):
    IDLE = "idle"
    CONFIGURING = "configuring"
    FETCHING = "fetching"
    EVALUATING = "evaluating"
    NOTIFYING = "notifying"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self):
        return self in (RunState.DONE, RunState.FAILED)


@dataclass
class RunOutcome:
    """What one compliance run ended with."""

    state: RunState = RunState.IDLE
    products_scanned: int = 0
    missing: List = field(default_factory=list)
    email_sent: bool = False
    error: Optional[TagCheckError] = None

    def advance(self, state):
        if self.state.is_terminal:
            raise RuntimeError(f"Run already finished in state {self.state.value}")
        self.state = state

    def fail(self, error):
        self.advance(RunState.FAILED)
        self.error = error

    @property
    def succeeded(self):
        return self.state is RunState.DONE
