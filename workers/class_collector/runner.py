"""
Collector runner: top-level orchestration from a source tree and a class tree
to a consolidated output tree and a report.

Two phases:
  1. Validate: scan the source tree and resolve every .java file to its
     class files.  Any unresolved source aborts the run before a single
     file is copied.
  2. Act: copy non-Java files, then copy each class file while decoding
     its JDK version.  An unreadable header downgrades that class file to
     "unknown version"; a failed copy aborts.

Usage (CLI)::

    python -m class_collector.runner \\
        --source-dir src/main/java \\
        --class-dir target/classes \\
        --output-dir out/patch

Usage (library)::

    from class_collector.runner import run_collect
    report = run_collect("src/main/java", "target/classes", "out/patch")
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from class_collector.core.artifact_resolver import claim_artifacts, resolve_all
from class_collector.core.header_decoder import decode_version
from class_collector.core.tree_scanner import scan_tree
from class_collector.errors import CollectorError, HeaderError, MissingRoot
from class_collector.io.copier import copy_mirrored, file_size
from class_collector.io.schema import (
    CollectCounts,
    CollectReport,
    CopiedArtifact,
    CopiedFile,
    UnitEntry,
)
from class_collector.io.writer import write_report
from class_collector.policy.profile import Profile
from class_collector.policy.verdict import (
    Verdict,
    VersionTally,
    judge_versions,
    tally_versions,
)

logger = logging.getLogger(__name__)

RULE = "-" * 40


def _require_dir(path: Path, what: str) -> None:
    if not path.is_dir():
        raise MissingRoot(f"{what} does not exist: {path}", path)


def format_tally(tally: VersionTally) -> List[str]:
    """``<label>: <count> file(s)`` per JDK label, in first-seen order."""
    return [f"{label}: {len(files)} file(s)" for label, files in tally.items()]


def run_collect(
    source_dir: str | Path,
    class_dir: str | Path,
    output_dir: str | Path,
    profile: Profile | None = None,
    echo: Optional[Callable[[str], None]] = print,
) -> CollectReport:
    """
    Copy every class file compiled from *source_dir* out of *class_dir*,
    plus every non-Java file of *source_dir*, into *output_dir*.

    Parameters
    ----------
    source_dir : path
        Root of the Java source tree.
    class_dir : path
        Root of the compiled class tree, mirroring the package layout.
    output_dir : path
        Destination root.  Created if absent.
    profile : Profile, optional
        Naming conventions.  Defaults to Profile.v0().
    echo : callable, optional
        Receives one line per copied file plus the summary.  ``None``
        silences the report.

    Raises
    ------
    MissingRoot
        *source_dir* or *class_dir* does not exist.
    TraversalError
        A directory cannot be read.
    UnresolvedUnit
        A .java file has no class file.  Nothing has been copied.
    CopyError
        A copy failed.  Files copied before it remain in *output_dir*.
    """
    if profile is None:
        profile = Profile.v0()
    emit = echo or (lambda line: None)

    source_dir = Path(source_dir)
    class_dir = Path(class_dir)
    output_dir = Path(output_dir)

    _require_dir(source_dir, "Source directory")
    _require_dir(class_dir, "Class directory")

    # ── Phase 1: scan + resolve everything ───────────────────────────
    scan = scan_tree(source_dir, profile)
    matches = claim_artifacts(
        resolve_all(class_dir, source_dir, scan.source_units, profile)
    )
    logger.debug("Resolved %d source files", len(matches))

    output_dir.mkdir(parents=True, exist_ok=True)
    counts = CollectCounts(source_units=len(matches))

    # ── Phase 2a: non-source files ───────────────────────────────────
    copied_files: List[CopiedFile] = []
    for other in scan.other_files:
        rel = other.relative_to(source_dir)
        size = file_size(other)
        emit(f"non-source file: {rel.as_posix()}, size: {size} bytes")
        copy_mirrored(other, source_dir, output_dir)
        copied_files.append(CopiedFile(path=rel.as_posix(), size=size))
        counts.non_source_files += 1

    if copied_files:
        emit(RULE)

    # ── Phase 2b: class files + versions ─────────────────────────────
    units: List[UnitEntry] = []
    decoded: List[Tuple[Path, str]] = []

    for match in matches:
        entry = UnitEntry(source=match.unit.as_posix())
        emit(RULE)
        for art in match.artifacts:
            rel = art.relative_to(class_dir)
            size = file_size(art)

            copied = CopiedArtifact(path=rel.as_posix(), size=size)
            try:
                record = decode_version(art, profile.magic)
            except HeaderError as e:
                logger.warning("Cannot read JDK version: %s", e)
                copied.header_error = str(e)
                counts.unknown_versions += 1
            else:
                copied.major = record.major
                copied.minor = record.minor
                copied.version_label = record.label
                decoded.append((rel, record.label))

            emit(
                f"source: {entry.source}, artifact: {copied.path}, "
                f"size: {size} bytes, version: {copied.version_label}"
            )
            copy_mirrored(art, class_dir, output_dir)
            entry.artifacts.append(copied)
            counts.artifacts += 1
        units.append(entry)

    emit(RULE)

    # ── Phase 3: version consistency ─────────────────────────────────
    tally = tally_versions(decoded)
    verdict, reasons = judge_versions(tally, counts.unknown_versions)

    emit("")
    emit("--- summary ---")
    emit(f"source units: {counts.source_units}")
    emit(f"class files: {counts.artifacts}")
    emit(f"non-source files: {counts.non_source_files}")
    emit(f"total copied: {counts.total_copied}")

    if len(tally) > 1:
        emit("")
        emit("-- class files by JDK version --")
        for line in format_tally(tally):
            emit(line)
        logger.warning(
            "Multiple JDK versions detected: %s", ", ".join(format_tally(tally))
        )
    elif tally:
        emit(f"all class files: {next(iter(tally))}")

    logger.info(
        "Copied %d class files and %d non-source files to %s",
        counts.artifacts, counts.non_source_files, output_dir,
    )

    return CollectReport(
        profile_id=profile.profile_id,
        source_dir=str(source_dir),
        class_dir=str(class_dir),
        output_dir=str(output_dir),
        verdict=verdict.value,
        reasons=reasons,
        counts=counts,
        non_source_files=copied_files,
        units=units,
        version_tally={
            label: [p.as_posix() for p in paths] for label, paths in tally.items()
        },
    )


# ── CLI ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for class_collector."""
    parser = argparse.ArgumentParser(
        prog="class-collector",
        description="Copy the class files compiled from a Java source tree into an output directory",
    )
    parser.add_argument(
        "-s", "--source-dir",
        type=Path,
        required=True,
        help="Source root containing .java files",
    )
    parser.add_argument(
        "-c", "--class-dir",
        type=Path,
        required=True,
        help="Compiled class root",
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        required=True,
        help="Output directory (created if absent)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Also write the run report as JSON to this path",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        report = run_collect(args.source_dir, args.class_dir, args.output_dir)
    except CollectorError as e:
        logger.error("%s", e)
        logger.error("Operation cancelled")
        return 1

    if args.report:
        write_report(report, args.report)
        print(f"Report written to: {args.report}")

    if report.verdict == Verdict.WARN.value:
        logger.warning("Run finished with warnings: %s", ", ".join(report.reasons))
    return 0


if __name__ == "__main__":
    sys.exit(main())
