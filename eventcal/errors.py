# eventcal/errors.py - exceptions raised by the calendar month builder


class CalendarError(Exception):
    """Base class for everything the calendar core raises."""


class InvalidDateError(CalendarError, ValueError):
    """The reference date can't be turned into calendar fields."""


class MalformedEventError(CalendarError, ValueError):
    """A storage row is missing a required field or has a bad value."""

    def __init__(self, message: str, event_id=None):
        super().__init__(message)
        self.event_id = event_id


class StorageError(CalendarError):
    """A query against the event store failed."""

    def __init__(self, operation: str, scope=None):
        detail = f"{operation} failed"
        if scope is not None:
            detail += f" for {scope}"
        super().__init__(detail)
        self.operation = operation
        self.scope = scope
