"""
Human-readable console summaries of validation reports.
"""

from pathlib import Path
from typing import Callable

from pokedex_validator.utils.core.report import Failure, ValidationReport


def format_id_header(failure: Failure) -> str:
    """Header line for records identified by id, e.g. "ID: 25 (Pikachu)"."""
    suffix = f" ({failure.name})" if failure.name else ""
    return f"ID: {failure.id}{suffix}"


def format_summary(
    report: ValidationReport,
    report_path: Path,
    entity_label: str,
    failure_label: str,
    header: Callable[[Failure], str] = format_id_header,
) -> list[str]:
    """Build the console lines for a validation report.

    Args:
        report (ValidationReport): The aggregated report
        report_path (Path): Where the JSON report was written
        entity_label (str): Plural used on success (e.g. "moves")
        failure_label (str): Count label used on failure (e.g. "move(s)")
        header (Callable[[Failure], str], optional): Formats the first line of each failure block.

    Returns:
        list[str]: Lines to print, in order

    Example:
        >>> format_summary(report, Path("scripts/items-validation.json"), "items", "item(s)")
        ['OK: 3 items validated', 'Results written to: scripts/items-validation.json']
    """
    if report.ok:
        return [
            f"OK: {report.total} {entity_label} validated",
            f"Results written to: {report_path}",
        ]

    lines = [
        f"Found {report.failed} {failure_label} with missing keys",
        f"Results written to: {report_path}",
        "",
    ]
    for failure in report.failures:
        lines.append(header(failure))
        lines.append(f"Missing keys: {', '.join(failure.missing_keys)}")
        lines.append("")
    return lines
