"""Typed exceptions raised while turning time markers into cuts."""


class FFCutError(Exception):
    """Base class for every error ffcut raises on purpose."""


class MalformedNumberError(FFCutError, ValueError):
    """A time token could not be read as a number."""


class DigitOutOfRangeError(FFCutError, ValueError):
    """A two-digit clock group is not a base-60 digit (00-59)."""

    def __init__(self, group: str, position: int, digits: str):
        self.group = group
        self.position = position
        self.digits = digits
        super().__init__(
            f"invalid clock group {group!r} at position {position} in {digits!r}: must be below 60"
        )


class InvalidIntervalError(FFCutError, ValueError):
    """An interval starts after it ends."""


class NegativeContextError(FFCutError, ValueError):
    """Resolved context padding is negative."""


class InvalidPickIndexError(FFCutError, ValueError):
    """A pick list entry is not an integer."""


class FilesystemError(FFCutError, OSError):
    """The input path is missing, a directory, or has an unusable name."""


class ExternalToolError(FFCutError, RuntimeError):
    """ffmpeg or ffprobe failed."""


class FFmpegNotFoundError(ExternalToolError):
    pass
