from dataclasses import dataclass
from enum import Enum

from analysis_client.errors.classifier import UserFacingError

AnalysisReport = tuple[str, ...]


class RunStatus(str, Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"
    REJECTED = "rejected"
    FAILED = "failed"
    SUPERSEDED = "superseded"


@dataclass
class RunOutcome:
    """Result of one orchestration run.

    ``report`` holds the fragments rendered so far, in engine order.
    ``error`` is set for rejected and failed runs. ``cache_error`` records a
    failed commit, which does not change ``status``.
    """

    generation: int
    status: RunStatus
    report: AnalysisReport = ()
    error: UserFacingError | None = None
    cache_error: UserFacingError | None = None

    @property
    def succeeded(self) -> bool:
        return self.status in (RunStatus.COMPLETED, RunStatus.ABORTED)
