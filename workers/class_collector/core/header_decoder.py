"""
Header decoder: read the version fields of a JVM class file.

Responsibilities:
  - Read the fixed 8-byte header prefix of a class file.
  - Validate the 0xCAFEBABE magic number.
  - Return the big-endian minor / major version as a VersionRecord.
  - Translate a major version into a JDK release label.

This module intentionally does NOT parse anything past byte offset 8.
"""
import struct
from dataclasses import dataclass
from pathlib import Path

from class_collector.errors import InvalidMagicNumber, MalformedArtifact

CLASS_MAGIC = b"\xca\xfe\xba\xbe"

# magic (4s), minor_version (u2), major_version (u2)
_HEADER = struct.Struct(">4sHH")

# major_version -> JDK release, per the JVM specification table.
_JDK_LABELS = {
    45: "JDK 1.1",
    46: "JDK 1.2",
    47: "JDK 1.3",
    48: "JDK 1.4",
    49: "JDK 5",
    50: "JDK 6",
    51: "JDK 7",
    52: "JDK 8",
    53: "JDK 9",
    54: "JDK 10",
    55: "JDK 11",
    56: "JDK 12",
    57: "JDK 13",
    58: "JDK 14",
    59: "JDK 15",
    60: "JDK 16",
    61: "JDK 17",
    62: "JDK 18",
    63: "JDK 19",
    64: "JDK 20",
    65: "JDK 21",
}


def label_for(major: int) -> str:
    """Human-readable JDK release for a class-file major version."""
    label = _JDK_LABELS.get(major)
    if label is None:
        return f"unknown toolchain version (major: {major})"
    return label


@dataclass(frozen=True)
class VersionRecord:
    """Version fields decoded from a class-file header."""

    major: int
    minor: int

    @property
    def label(self) -> str:
        return label_for(self.major)


def decode_version(path: str | Path, magic: bytes = CLASS_MAGIC) -> VersionRecord:
    """
    Decode the version record from the header of the class file at *path*.

    Raises
    ------
    MalformedArtifact
        If the file cannot be read or holds fewer than 8 bytes.
    InvalidMagicNumber
        If the first 4 bytes are not *magic*.
    """
    p = Path(path)
    try:
        with open(p, "rb") as f:
            head = f.read(_HEADER.size)
    except OSError as e:
        raise MalformedArtifact(f"Cannot read class file header: {p} ({e})", p) from e

    if len(head) < _HEADER.size:
        raise MalformedArtifact(
            f"Truncated class file header ({len(head)} of {_HEADER.size} bytes): {p}",
            p,
        )

    file_magic, minor, major = _HEADER.unpack(head)
    if file_magic != magic:
        raise InvalidMagicNumber(
            f"Invalid class file, magic {file_magic.hex()} != {magic.hex()}: {p}",
            p,
        )

    return VersionRecord(major=major, minor=minor)
