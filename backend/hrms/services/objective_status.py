"""
Objective status transitions.

Status is stored on the objective. Progress submissions move it only through
next_status(); a general update may still set it directly.

Completion policy is "either completes": self progress and manager progress
are tracked independently and whichever submission reaches 100 completes the
objective. There is no averaging between the two.
"""

from hrms.models.objective import ObjectiveStatus

COMPLETION_PROGRESS = 100


def next_status(prior: ObjectiveStatus | str, progress: int) -> ObjectiveStatus:
    """Return the status after a progress submission of `progress`."""
    prior = ObjectiveStatus(prior)
    if progress == COMPLETION_PROGRESS:
        return ObjectiveStatus.COMPLETED
    if progress > 0 and prior == ObjectiveStatus.NOT_STARTED:
        return ObjectiveStatus.IN_PROGRESS
    return prior
