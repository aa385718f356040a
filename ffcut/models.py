"""Shared data types used across ffcut."""

from dataclasses import dataclass
from decimal import Decimal

from ffcut.timecode import format_clock


@dataclass(frozen=True)
class TimeRange:
    """A ``[start, end)`` clip region in seconds."""

    start: Decimal
    end: Decimal

    @property
    def duration(self) -> Decimal:
        return self.end - self.start

    def is_valid(self) -> bool:
        return self.start <= self.end

    def __str__(self) -> str:
        return f"{self.start}+{self.duration}"


@dataclass(frozen=True)
class ContextSpec:
    """Seconds of footage to keep around every clip.

    ``around`` fills in whichever of ``before``/``after`` was left at zero.
    """

    before: Decimal = Decimal(0)
    after: Decimal = Decimal(0)
    around: Decimal = Decimal(0)


@dataclass(frozen=True)
class FileParts:
    """Input filename split into the pieces output names are built from."""

    base: str
    ext: str
    postfix: str = "ffc"

    @property
    def input_path(self) -> str:
        return self.base + self.ext


@dataclass
class CutCommand:
    """One ffmpeg stream-copy trim, ready to print or run."""

    number: int
    time_range: TimeRange
    input_path: str
    output_path: str

    @property
    def start_clock(self) -> str:
        return format_clock(self.time_range.start)

    @property
    def duration_clock(self) -> str:
        return format_clock(self.time_range.duration)

    def command(self) -> str:
        return (
            f'ffmpeg -ss {self.start_clock} -i "{self.input_path}" '
            f'-c copy -t {self.duration_clock} "{self.output_path}"'
        )

    def argv(self) -> list[str]:
        return [
            "ffmpeg",
            "-ss", self.start_clock,
            "-i", self.input_path,
            "-c", "copy",
            "-t", self.duration_clock,
            self.output_path,
        ]


@dataclass
class CutOutcome:
    """Result of running a single CutCommand."""

    command: CutCommand
    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

