"""FFmpeg/ffprobe subprocess helpers."""

import logging
import shutil
import subprocess
from decimal import Decimal, InvalidOperation
from pathlib import Path

from ffcut.errors import ExternalToolError, FFmpegNotFoundError
from ffcut.models import CutCommand

logger = logging.getLogger(__name__)


def check_ffmpeg(tools: tuple[str, ...] = ("ffmpeg", "ffprobe")) -> None:
    """Raise FFmpegNotFoundError if any of *tools* is not on PATH."""
    for cmd in tools:
        if shutil.which(cmd) is None:
            raise FFmpegNotFoundError(f"{cmd} not found on PATH")


def parse_keyframe_times(stdout: str) -> list[int]:
    """Parse ``pts_time,flags`` CSV lines into sorted whole-second keyframes.

    Lines without a ``K`` flag or without a usable timestamp are skipped.
    """
    seconds: set[int] = set()
    for line in stdout.splitlines():
        fields = line.strip().split(",")
        if len(fields) < 2 or "K" not in fields[1]:
            continue
        try:
            seconds.add(int(Decimal(fields[0])))
        except (InvalidOperation, ValueError):
            continue
    return sorted(seconds)


def probe_keyframes(input_path: Path) -> list[int]:
    """List the keyframe times of the first video stream via ffprobe."""
    cmd = [
        "ffprobe",
        "-v", "error",
        "-select_streams", "v:0",
        "-show_entries", "packet=pts_time,flags",
        "-of", "csv=print_section=0",
        str(input_path),
    ]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        stderr = getattr(e, "stderr", None) or ""
        raise ExternalToolError(
            f"ffprobe failed for {input_path}: {stderr.strip() or e}"
        ) from e

    keyframes = parse_keyframe_times(result.stdout)
    logger.info("Found %d keyframes in %s", len(keyframes), input_path)
    return keyframes


def run_cut(command: CutCommand) -> str:
    """Run one trim and return ffmpeg's combined output."""
    try:
        result = subprocess.run(command.argv(), capture_output=True, text=True, check=True)
    except (OSError, subprocess.CalledProcessError) as e:
        stderr = getattr(e, "stderr", None) or ""
        raise ExternalToolError(
            f"ffmpeg failed for part {command.number}: {stderr.strip()[-500:] or e}"
        ) from e
    return (result.stdout or "") + (result.stderr or "")
