"""
Generated file model — an entry-point file before it hits the disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class GeneratedFile(BaseModel):
    """A file produced by the entry-point generators.

    Attributes:
        path:    Absolute or out_dir-relative path of the file.
        content: Full file content.
        reason:  Why this file was generated (logged on write).
    """

    path: str
    content: str
    reason: str = ""

    def write(self) -> Path:
        """Write the whole file in one call and return its path.

        An existing file is replaced.

        Raises:
            OSError: Any write failure, unchanged.
        """
        target = Path(self.path)
        target.write_text(self.content, encoding="utf-8")
        logger.debug("Wrote %s (%s)", target, self.reason or "no reason given")
        return target
