"""
Profile: the naming and format conventions the collector relies on.

Core matching and decoding take these values from the profile instead of
hard-coding them, so a differently named toolchain is a profile change.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Which files are sources, which are artifacts, and how they relate."""

    # Identity
    profile_id: str

    # File classification (exact, case-sensitive suffix match)
    source_suffix: str
    artifact_suffix: str

    # Compiler-synthesized units are named <Stem><separator><name>
    nested_separator: str

    # Fixed leading bytes of every artifact header
    magic: bytes

    @classmethod
    def v0(cls) -> "Profile":
        """The v0 profile: Java sources compiled to JVM class files."""
        return cls(
            profile_id="java-class-v0",
            source_suffix=".java",
            artifact_suffix=".class",
            nested_separator="$",
            magic=b"\xca\xfe\xba\xbe",
        )
