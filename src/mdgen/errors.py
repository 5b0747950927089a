"""Failure taxonomy for a generation run."""


class MdgenError(Exception):
    """Base error; ``str(err)`` is the message shown to the user."""

    kind = "Error"


class NotFoundError(MdgenError):
    """The root directory does not exist."""

    kind = "NotFound"


class AccessDeniedError(MdgenError):
    """A directory could not be listed."""

    kind = "AccessDenied"


class ReadFailureError(MdgenError):
    """A matched file could not be read as text."""

    kind = "ReadFailure"


class SessionBusyError(MdgenError):
    """A generation run is already in flight."""

    kind = "Busy"
