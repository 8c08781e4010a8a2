"""
Verdict: ACCEPT / WARN decision over the JDK versions of a run.

A mixed set of class-file versions is worth flagging but never fatal:
the copy has already happened and the output is still usable.
"""
from collections import defaultdict
from enum import Enum, unique
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

# label -> class files carrying that label
VersionTally = Dict[str, List[Path]]


@unique
class Verdict(str, Enum):
    ACCEPT = "ACCEPT"
    WARN = "WARN"


@unique
class VersionWarnReason(str, Enum):
    MULTIPLE_TOOLCHAIN_VERSIONS = "MULTIPLE_TOOLCHAIN_VERSIONS"
    UNKNOWN_VERSION = "UNKNOWN_VERSION"


def tally_versions(labelled: Iterable[Tuple[Path, str]]) -> VersionTally:
    """Group successfully decoded class files by JDK label, first-seen order."""
    tally: VersionTally = defaultdict(list)
    for path, label in labelled:
        tally[label].append(path)
    return dict(tally)


def judge_versions(tally: VersionTally, n_unknown: int = 0) -> Tuple[Verdict, List[str]]:
    """
    Evaluate a run's version tally.

    Only decoded class files are in *tally*; *n_unknown* counts the ones
    whose header could not be read.
    """
    reasons: List[str] = []

    if len(tally) > 1:
        reasons.append(VersionWarnReason.MULTIPLE_TOOLCHAIN_VERSIONS.value)

    if n_unknown:
        reasons.append(VersionWarnReason.UNKNOWN_VERSION.value)

    if reasons:
        return Verdict.WARN, reasons
    return Verdict.ACCEPT, []
