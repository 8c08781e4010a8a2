"""
Artifact resolver: find the class files compiled from one Java source.

A source ``<pkg>/Foo.java`` owns every ``<class_root>/<pkg>/*.class``
whose stem is exactly ``Foo`` or starts with ``Foo$`` (inner, local and
anonymous classes).  Matching is by file name only; class file contents
are never inspected here.

Only the direct children of the package directory are considered.
"""
import logging
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from class_collector.errors import TraversalError, UnresolvedUnit
from class_collector.policy.profile import Profile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArtifactMatch:
    """Class files owned by one source unit."""

    unit: Path                    # relative to the source root
    artifacts: Tuple[Path, ...]   # absolute, all inside one package directory


def _stem_matches(stem: str, unit_stem: str, separator: str) -> bool:
    return stem == unit_stem or stem.startswith(unit_stem + separator)


def resolve_artifacts(
    artifact_root: str | Path,
    unit: str | Path,
    profile: Profile | None = None,
) -> List[Path]:
    """
    Return the artifacts for the source unit at relative path *unit*.

    An absent package directory yields an empty list, not an error; the
    caller decides what a missing match means.

    Raises
    ------
    TraversalError
        If the package directory exists but cannot be listed.
    """
    if profile is None:
        profile = Profile.v0()

    unit = Path(unit)
    package_dir = Path(artifact_root) / unit.parent
    if not package_dir.is_dir():
        logger.debug("No package directory for %s at %s", unit, package_dir)
        return []

    try:
        children = sorted(package_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise TraversalError(f"Cannot read directory: {package_dir} ({e})", package_dir) from e

    unit_stem = unit.stem
    return [
        child
        for child in children
        if child.suffix == profile.artifact_suffix
        and child.is_file()
        and _stem_matches(child.stem, unit_stem, profile.nested_separator)
    ]


def resolve_all(
    artifact_root: str | Path,
    source_root: str | Path,
    source_units: Iterable[Path],
    profile: Profile | None = None,
) -> List[ArtifactMatch]:
    """
    Resolve every source unit, in order, before anything is copied.

    Raises
    ------
    UnresolvedUnit
        For the first unit with no matching artifact.
    """
    if profile is None:
        profile = Profile.v0()

    source_root = Path(source_root)
    matches: List[ArtifactMatch] = []
    for src in source_units:
        rel = Path(src).relative_to(source_root)
        found = resolve_artifacts(artifact_root, rel, profile)
        if not found:
            raise UnresolvedUnit(
                f"No {profile.artifact_suffix} file found for source file: {rel}",
                rel,
            )
        matches.append(ArtifactMatch(unit=rel, artifacts=tuple(found)))
    return matches


def claim_artifacts(matches: List[ArtifactMatch]) -> List[ArtifactMatch]:
    """
    Give every artifact a single owner.

    When both ``Foo.java`` and ``Foo$Bar.java`` sit in one package, the
    resolver hands ``Foo$Bar.class`` to both.  The unit with the longest
    stem keeps it.  Units left with no artifact are unresolved.

    Raises
    ------
    UnresolvedUnit
        If a unit loses every artifact it matched.
    """
    owner: Dict[Path, ArtifactMatch] = {}
    for m in matches:
        for art in m.artifacts:
            current = owner.get(art)
            if current is None or len(m.unit.stem) > len(current.unit.stem):
                if current is not None:
                    logger.info(
                        "%s claimed by %s and %s; assigning to %s",
                        art.name, current.unit, m.unit, m.unit,
                    )
                owner[art] = m
            else:
                logger.info(
                    "%s claimed by %s and %s; assigning to %s",
                    art.name, current.unit, m.unit, current.unit,
                )

    kept: Dict[Path, List[Path]] = defaultdict(list)
    for m in matches:
        for art in m.artifacts:
            if owner[art] is m:
                kept[m.unit].append(art)

    claimed: List[ArtifactMatch] = []
    for m in matches:
        arts = kept.get(m.unit, [])
        if not arts:
            raise UnresolvedUnit(
                f"Every class file matched by {m.unit} belongs to another source file",
                m.unit,
            )
        claimed.append(ArtifactMatch(unit=m.unit, artifacts=tuple(arts)))
    return claimed
