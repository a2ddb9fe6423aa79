from __future__ import annotations

from ..models.conversion_result import GenerateReport, ParseReport

"""SUMMARY line rendering for CLI runs.

Formats:
    SUMMARY entries={n} skipped={m} elapsed_sec={s} output={path|-}
    SUMMARY rows={n} duplicates={d} output={path}
    SUMMARY valid={true|false} input={path}
"""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # 指数表記を避ける
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_parse_summary(report: ParseReport) -> str:
    """Render the SUMMARY line for a parse run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> report = ParseReport(
        ...     mapping={"a": "A"}, source=Path("i18n.xlsx"), destination=None,
        ...     start_time=t, end_time=t, elapsed_seconds=2.0,
        ... )
        >>> render_parse_summary(report)
        'SUMMARY entries=1 skipped=0 elapsed_sec=2 output=-'
    """
    output = str(report.destination) if report.destination is not None else "-"
    return (
        f"SUMMARY entries={report.entry_count} "
        f"skipped={report.skipped_count} "
        f"elapsed_sec={_format_seconds(report.elapsed_seconds)} "
        f"output={output}"
    )


def render_generate_summary(report: GenerateReport) -> str:
    return (
        f"SUMMARY rows={report.row_count} "
        f"duplicates={len(report.duplicate_keys)} "
        f"output={report.destination}"
    )


def render_validate_summary(valid: bool, path: object) -> str:
    return f"SUMMARY valid={'true' if valid else 'false'} input={path}"
