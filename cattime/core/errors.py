# cattime/core/errors.py
# Client-caused failures raised by the working-time service.
# All of them are answered with HTTP 400 and the message as "detail".


class WorkingTimeError(Exception):
    """Base class for business rule violations."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(WorkingTimeError):
    """An employee or working time id does not resolve."""


class NotAuthorizedError(WorkingTimeError):
    """The acting employee may not touch another employee's times."""


class ValidationError(WorkingTimeError):
    """Submitted times are inconsistent."""


class ConflictError(WorkingTimeError):
    """Checkin while checked in, or checkout while not checked in."""
