"""Input filename handling and collision-free output names."""

import logging
import os

from ffcut.errors import FilesystemError
from ffcut.models import FileParts
from ffcut.tokens import is_time_token

logger = logging.getLogger(__name__)

DEFAULT_POSTFIX = "ffc"


def extension(path: str) -> str:
    """Return everything from the last dot of the file name, dot included.

    Unlike ``os.path.splitext`` a leading dot counts, so ``".mp4"`` is all
    extension.
    """
    name = os.path.basename(path)
    i = name.rfind(".")
    return name[i:] if i >= 0 else ""


def filename_parts(args: list[str]) -> FileParts:
    """Find the input file and optional postfix among the non-time arguments.

    The first non-time argument must name an existing regular file; the second,
    if any, replaces the default postfix. Anything after that is ignored.
    """
    base = ext = None
    postfix = DEFAULT_POSTFIX

    for arg in args:
        if is_time_token(arg):
            continue

        if base is not None:
            postfix = arg
            break

        if not os.path.exists(arg):
            raise FilesystemError(f"no such file: {arg}")
        if os.path.isdir(arg):
            raise FilesystemError(f"provided path is a directory: {arg}")

        ext = extension(arg)
        if len(ext) >= len(os.path.basename(arg)):
            raise FilesystemError(f"extension is not shorter than name: {arg}")
        base = arg[:len(arg) - len(ext)]

    if base is None:
        raise FilesystemError("no filename provided")

    return FileParts(base=base, ext=ext, postfix=postfix)


def unique_output_name(parts: FileParts, number: int, taken: set[str] | None = None) -> str:
    """Return ``<base>-<n><postfix><ext>`` for the first free ``n >= number``.

    Names in *taken* count as used even if they do not exist on disk yet.
    """
    taken = taken or set()
    while True:
        name = f"{parts.base}-{number}{parts.postfix}{parts.ext}"
        logger.info("Name constructed: %s", name)
        if name not in taken and not os.path.exists(name):
            return name
        number += 1
