"""
Manifest presentation: rendering rows to bytes and reading them back.
"""

from .manifest import (
    FILENAME_LABEL,
    LABELS,
    WORD_LABEL,
    ManifestReader,
    ManifestWriter,
    render_header,
    render_row,
)

__all__ = [
    "FILENAME_LABEL",
    "LABELS",
    "WORD_LABEL",
    "ManifestReader",
    "ManifestWriter",
    "render_header",
    "render_row",
]
