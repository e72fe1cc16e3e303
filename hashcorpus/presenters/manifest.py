"""
Manifest rendering and parsing.

A manifest is tab-separated bytes: a header naming the item column and
every algorithm, then one line per item with lowercase hex digests in
header order. Every line ends with a newline. Identifiers are written
verbatim, without escaping.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, BinaryIO

from ..core.exceptions import ManifestFormatError
from ..core.models.manifest import ManifestRow

if TYPE_CHECKING:
    from ..hashing.registry import AlgorithmRegistry

FILENAME_LABEL = "filename"
WORD_LABEL = "word"
LABELS = (FILENAME_LABEL, WORD_LABEL)

_LOWER_HEX = re.compile(rb"[0-9a-f]+")


def render_header(label: str, algorithm_names: Iterable[str]) -> bytes:
    """Render the header line.

    Examples:
        >>> render_header("word", ["SHA1", "SHA256"])
        b'word\\tSHA1\\tSHA256\\n'
    """
    return "\t".join([label, *algorithm_names]).encode("ascii") + b"\n"


def render_row(row: ManifestRow) -> bytes:
    """Render one item line: identifier, then each digest as lowercase hex.

    Examples:
        >>> render_row(ManifestRow(identifier=b"x", digests=(("A", b"\\x00\\xff"),)))
        b'x\\t00ff\\n'
    """
    fields = [row.identifier]
    fields.extend(digest.hex().encode("ascii") for _, digest in row.digests)
    return b"\t".join(fields) + b"\n"


class ManifestWriter:
    """
    Stream a manifest to a binary output.

    The header is written once, before the first row, even if no row follows.
    """

    def __init__(self, stream: BinaryIO, label: str, algorithm_names: Iterable[str]) -> None:
        self._stream = stream
        self._label = label
        self._algorithm_names = list(algorithm_names)
        self._header_written = False
        self.rows_written = 0

    def write_header(self) -> None:
        if not self._header_written:
            self._stream.write(render_header(self._label, self._algorithm_names))
            self._header_written = True

    def write_row(self, row: ManifestRow) -> None:
        self.write_header()
        self._stream.write(render_row(row))
        self.rows_written += 1

    def write_all(self, rows: Iterable[ManifestRow]) -> int:
        """Write the header and every row, returning the number of rows."""
        self.write_header()
        for row in rows:
            self.write_row(row)
        self._stream.flush()
        return self.rows_written


class ManifestReader:
    """
    Parse a manifest back into rows.

    The header is read on construction. Iterating yields ManifestRow
    objects whose digests are in header order.

    Raises:
        ManifestFormatError: On an unknown label or algorithm, a row with
            the wrong column count, or a digest that is not lowercase hex
            of 2 * digest_length characters
    """

    def __init__(self, stream: BinaryIO, registry: AlgorithmRegistry) -> None:
        self._stream = stream
        self._line_number = 1

        header = self._split(stream.readline())
        if header is None:
            raise ManifestFormatError("Manifest is empty", line_number=1)

        label = header[0].decode("ascii", errors="replace")
        if label not in LABELS:
            raise ManifestFormatError(
                f"Unknown manifest label: {label}", line_number=1, context={"label": label}
            )

        self.label = label
        self.algorithms = []
        for raw_name in header[1:]:
            name = raw_name.decode("ascii", errors="replace")
            descriptor = registry.get(name)
            if descriptor is None:
                raise ManifestFormatError(
                    f"Unknown algorithm column: {name}", line_number=1
                )
            self.algorithms.append(descriptor)

        if not self.algorithms:
            raise ManifestFormatError("Manifest header names no algorithms", line_number=1)

    @property
    def algorithm_names(self) -> list[str]:
        return [descriptor.name for descriptor in self.algorithms]

    def _split(self, line: bytes) -> list[bytes] | None:
        if not line:
            return None
        if not line.endswith(b"\n"):
            raise ManifestFormatError(
                "Line is not newline-terminated", line_number=self._line_number
            )
        return line[:-1].split(b"\t")

    def __iter__(self) -> Iterator[ManifestRow]:
        expected_columns = 1 + len(self.algorithms)
        for line in self._stream:
            self._line_number += 1
            fields = self._split(line)
            if fields is None:
                break
            if len(fields) != expected_columns:
                raise ManifestFormatError(
                    f"Expected {expected_columns} columns, found {len(fields)}",
                    line_number=self._line_number,
                )

            digests = []
            for descriptor, field in zip(self.algorithms, fields[1:]):
                if len(field) != 2 * descriptor.digest_length or not _LOWER_HEX.fullmatch(field):
                    raise ManifestFormatError(
                        f"Malformed {descriptor.name} digest",
                        line_number=self._line_number,
                    )
                digests.append((descriptor.name, bytes.fromhex(field.decode("ascii"))))

            yield ManifestRow(identifier=fields[0], digests=tuple(digests))
