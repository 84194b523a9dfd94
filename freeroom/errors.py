class FreeRoomError(Exception):
    pass


class MalformedLesson(FreeRoomError, ValueError):
    """A single lesson entry could not be parsed; the lesson is skipped."""


class InvalidQuery(FreeRoomError, ValueError):
    """The requested day or time window is unusable."""
