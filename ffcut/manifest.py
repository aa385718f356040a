"""JSON manifest schema — the contract between CLI/API and engine."""

import json
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from ffcut.models import ContextSpec


@dataclass
class CutOptions:
    """Flags that steer a single run."""

    seconds: bool = False
    dry_run: bool = False
    verbose: bool = False
    before_context: Decimal = Decimal(0)
    after_context: Decimal = Decimal(0)
    context: Decimal = Decimal(0)
    pick: str = ""
    safe_index: bool = False

    def context_spec(self) -> ContextSpec:
        return ContextSpec(
            before=self.before_context,
            after=self.after_context,
            around=self.context,
        )


@dataclass
class Manifest:
    """Top-level cut manifest: the raw arguments plus options."""

    args: list[str]
    version: str = "1"
    options: CutOptions = field(default_factory=CutOptions)


_DECIMAL_OPTIONS = ("before_context", "after_context", "context")
_BOOL_OPTIONS = ("seconds", "dry_run", "verbose", "safe_index")


def options_from_dict(data: dict) -> CutOptions:
    """Build CutOptions from JSON-like data; numbers go through ``str``."""
    if not isinstance(data, dict):
        raise ValueError("Manifest 'options' must be an object")
    values = dict(data)
    unknown = set(values) - set(CutOptions.__dataclass_fields__)
    if unknown:
        raise ValueError(f"Unknown manifest options: {', '.join(sorted(unknown))}")
    for key in _DECIMAL_OPTIONS:
        if key in values:
            try:
                values[key] = Decimal(str(values[key]))
            except InvalidOperation as e:
                raise ValueError(f"Option {key!r} must be a number") from e
            if not values[key].is_finite():
                raise ValueError(f"Option {key!r} must be a number")
    for key in _BOOL_OPTIONS:
        if key in values and not isinstance(values[key], bool):
            raise ValueError(f"Option {key!r} must be true or false")
    if "pick" in values and not isinstance(values["pick"], str):
        raise ValueError("Option 'pick' must be a string such as \"1,3\"")
    return CutOptions(**values)


def manifest_from_dict(data: dict) -> Manifest:
    args = data.get("args")
    if not isinstance(args, list) or not all(isinstance(a, str) for a in args):
        raise ValueError("Manifest must contain an 'args' list of strings")

    return Manifest(
        version=str(data.get("version", "1")),
        args=list(args),
        options=options_from_dict(data.get("options", {})),
    )


def load_manifest(path: str | Path) -> Manifest:
    """Load and validate a manifest from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError("Manifest must be a JSON object")
    return manifest_from_dict(data)
