"""Orchestrator — turns a Manifest into ffmpeg trims and runs them."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ffcut import ffutil
from ffcut.errors import ExternalToolError
from ffcut.intervals import adjust_times, build_intervals
from ffcut.keyframes import snap_to_keyframes
from ffcut.manifest import Manifest
from ffcut.models import CutCommand, CutOutcome, FileParts, TimeRange
from ffcut.naming import filename_parts, unique_output_name
from ffcut.picks import parse_picks, select_parts
from ffcut.tokens import collect_times

logger = logging.getLogger(__name__)


@dataclass
class EngineResult:
    commands: list[CutCommand] = field(default_factory=list)
    outcomes: list[CutOutcome] = field(default_factory=list)
    dry_run: bool = False

    @property
    def failures(self) -> list[CutOutcome]:
        return [o for o in self.outcomes if not o.ok]


def compute_ranges(manifest: Manifest, parts: FileParts) -> list[TimeRange]:
    """Parse, pad and optionally keyframe-snap the manifest's time markers.

    Snapping starts from the unpadded ranges and replaces the padded ones.
    """
    opts = manifest.options
    raw = build_intervals(collect_times(manifest.args), seconds=opts.seconds)
    ranges = adjust_times(raw, opts.context_spec())

    if opts.safe_index:
        ffutil.check_ffmpeg(("ffprobe",))
        keyframes = ffutil.probe_keyframes(Path(parts.input_path))
        ranges = snap_to_keyframes(raw, keyframes)

    return ranges


def plan(manifest: Manifest) -> list[CutCommand]:
    """Build every CutCommand for the manifest without running anything."""
    parts = filename_parts(manifest.args)
    picks = parse_picks(manifest.options.pick)
    ranges = compute_ranges(manifest, parts)

    commands: list[CutCommand] = []
    taken: set[str] = set()
    for number, tr in select_parts(ranges, picks):
        output = unique_output_name(parts, number, taken)
        taken.add(output)
        commands.append(
            CutCommand(
                number=number,
                time_range=tr,
                input_path=parts.input_path,
                output_path=output,
            )
        )
    return commands


def process(
    manifest: Manifest,
    on_progress: Callable[[str, float], None] | None = None,
) -> EngineResult:
    """Plan the cuts and, unless this is a dry run, execute them one by one.

    A failing trim is logged and recorded; the remaining parts still run.

    Args:
        manifest: Validated cut manifest.
        on_progress: Optional callback(stage_name, fraction_complete).
    """

    def _progress(stage: str, frac: float) -> None:
        if on_progress:
            on_progress(stage, frac)

    commands = plan(manifest)
    result = EngineResult(commands=commands, dry_run=manifest.options.dry_run)
    if manifest.options.dry_run or not commands:
        return result

    ffutil.check_ffmpeg(("ffmpeg",))

    total = len(commands)
    for i, command in enumerate(commands):
        _progress(f"Cutting part {command.number}", i / total)
        logger.info("%s", command.command())
        try:
            output = ffutil.run_cut(command)
        except ExternalToolError as e:
            logger.error("%s", e)
            result.outcomes.append(CutOutcome(command=command, error=str(e)))
            continue
        if output:
            logger.info("%s", output)
        result.outcomes.append(CutOutcome(command=command, output=output))

    _progress("Done", 1.0)
    return result
