"""Enumeration of drawable resource identifiers."""

import logging
from pathlib import Path
from typing import Iterable

from ..config import DRAWABLE_SUFFIXES
from ..errors import ParseError

logger = logging.getLogger(__name__)


class DrawableEnumerator:
    """Turns image file names in drawable directories into identifiers."""

    def __init__(self, suffixes: tuple[str, ...] = DRAWABLE_SUFFIXES):
        self.suffixes = suffixes

    def enumerate(self, directories: Iterable[Path]) -> list[str]:
        """List drawable ids across directories, in directory order.

        The same file name in two directories is reported twice.

        Args:
            directories: Directories to scan (not recursively).

        Returns:
            Identifiers such as ``icon`` for ``icon.png``.
        """
        drawables = []
        for directory in directories:
            drawables.extend(self.enumerate_directory(Path(directory)))
        return drawables

    def enumerate_directory(self, directory: Path) -> list[str]:
        """List drawable ids of a single directory."""
        try:
            names = sorted(entry.name for entry in directory.iterdir())
        except OSError as e:
            raise ParseError(directory, str(e)) from e

        drawables = []
        for name in names:
            if not name.endswith(self.suffixes):
                continue
            identifier = name.split(".", 1)[0].strip()
            if identifier:
                drawables.append(identifier)

        logger.debug("Found %d drawables in %s", len(drawables), directory)
        return drawables
