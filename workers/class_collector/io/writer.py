"""
Writer: serialize the collector report to JSON.
"""
import json
from pathlib import Path

from class_collector.io.schema import CollectReport


def write_report(report: CollectReport, report_path: Path) -> Path:
    """
    Write *report* to *report_path* as sorted, indented JSON.

    Creates the parent directory if it does not exist.
    Returns the report path.
    """
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(
        json.dumps(
            report.model_dump(mode="json"),
            indent=2,
            sort_keys=True,
        )
        + "\n"
    )
    return report_path
