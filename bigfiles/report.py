from __future__ import annotations
from typing import Iterable, List
from .models import FileRecord, ScanResult, SizeThreshold, SizeUnit
from .utils import format_number, quote_path, to_unit

RULE_WIDTH = 80

def sort_records(records: Iterable[FileRecord]) -> List[FileRecord]:
    return sorted(records, key=lambda r: r.size_bytes, reverse=True)

def format_scan_banner(directory: str, threshold: SizeThreshold) -> str:
    unit = threshold.display_unit
    shown = format_number(to_unit(threshold.bytes, unit))
    return f"Scanning {quote_path(directory)} for files >= {shown} {unit.label}..."

def format_elapsed(seconds: float) -> str:
    return f"Scanned in: {seconds:.2f}s"

def format_table(records: Iterable[FileRecord], unit: SizeUnit) -> List[str]:
    lines = [f"{'Size (' + unit.label + ')':<15} Path", "-" * RULE_WIDTH]
    for r in records:
        lines.append(f"{to_unit(r.size_bytes, unit):>14.2f}  {r.path}")
    return lines

def format_totals(matched: int, scanned: int) -> str:
    return f"Total: {matched} files (scanned {scanned} files)"

def render_report(result: ScanResult, threshold: SizeThreshold) -> str:
    """Everything printed after the banner: timing, table and totals."""
    records = sort_records(result.records)
    lines = [format_elapsed(result.elapsed_sec)]
    lines.extend(format_table(records, threshold.display_unit))
    lines.append("")
    lines.append(format_totals(len(records), result.scanned_count))
    return "\n".join(lines)
