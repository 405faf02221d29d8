"""Exceptions raised by the objective lifecycle."""


class ObjectiveError(Exception):
    """Base error for objective operations. Carries the HTTP status to surface."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ObjectiveError):
    """A referenced objective, key result, review or employee does not exist."""

    status_code = 404


class ForbiddenError(ObjectiveError):
    """The acting user lacks the relationship required for the mutation."""

    status_code = 403


class BadRequestError(ObjectiveError):
    """A cross-entity rule was violated (double link, employee mismatch)."""

    status_code = 400
