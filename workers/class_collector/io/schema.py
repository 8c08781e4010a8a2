"""
Schema: Pydantic models for the collector run report.

One output per run:
  collect_report.json, listing every copied file, per-unit class files with
  their JDK labels, the version tally and the run verdict.

Runtime contract fields (present in every output):
  package_name, collector_version, profile_id, schema_version.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field

from class_collector import COLLECTOR_VERSION, PACKAGE_NAME, SCHEMA_VERSION

UNKNOWN_VERSION = "unknown version"


# ── Copied files ─────────────────────────────────────────────────────────────

class CopiedFile(BaseModel):
    """A non-source file copied from the source tree."""
    path: str          # relative to the source root
    size: int


class CopiedArtifact(BaseModel):
    """A class file copied from the class tree."""

    path: str          # relative to the class root
    size: int

    major: Optional[int] = None
    minor: Optional[int] = None
    version_label: str = UNKNOWN_VERSION

    # Set when the header could not be decoded.
    header_error: Optional[str] = None


class UnitEntry(BaseModel):
    """One Java source file and the class files it owns."""
    source: str        # relative to the source root
    artifacts: List[CopiedArtifact] = Field(default_factory=list)


# ── Run-level report ─────────────────────────────────────────────────────────

class CollectCounts(BaseModel):
    source_units: int = 0
    artifacts: int = 0
    non_source_files: int = 0
    unknown_versions: int = 0

    @computed_field
    @property
    def total_copied(self) -> int:
        return self.artifacts + self.non_source_files


class CollectReport(BaseModel):
    """Run-level summary: collect_report.json."""

    package_name: str = PACKAGE_NAME
    collector_version: str = COLLECTOR_VERSION
    schema_version: str = SCHEMA_VERSION
    profile_id: str

    source_dir: str
    class_dir: str
    output_dir: str

    verdict: str              # ACCEPT | WARN
    reasons: List[str] = Field(default_factory=list)

    counts: CollectCounts = Field(default_factory=CollectCounts)

    non_source_files: List[CopiedFile] = Field(default_factory=list)
    units: List[UnitEntry] = Field(default_factory=list)

    # JDK label -> class files (relative to class root) with that label
    version_tally: Dict[str, List[str]] = Field(default_factory=dict)

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
