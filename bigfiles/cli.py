from __future__ import annotations
import sys
from typing import List, Optional
from .logging_utils import get_logger
from .report import format_scan_banner, render_report
from .scanner import scan
from .sizespec import threshold_from_token

APP_NAME = "list-big-files"

HELP_TEXT = f"""\
{APP_NAME} - Find large files in a directory

USAGE:
    {APP_NAME} [DIRECTORY] [SIZE]
    {APP_NAME} --help
    {APP_NAME} help

ARGUMENTS:
    DIRECTORY    Path to directory to scan (default: current directory)
    SIZE         Minimum file size with optional unit
                 - Without unit: interpreted as MB (e.g., 100 = 100MB)
                 - With unit: MB or GB (e.g., 50MB, 1GB, 2G, 500M)
                 Default: 100MB

EXAMPLES:
    {APP_NAME} /home/user/documents
        Scan documents for files >= 100MB (default)

    {APP_NAME} . 50MB
        Scan current directory for files >= 50MB

    {APP_NAME} /path 1GB
        Scan /path for files >= 1GB

    {APP_NAME} ~/Downloads 200M
        Scan Downloads for files >= 200MB

OUTPUT:
    Files are sorted by size (largest first) with scan timing information"""

log = get_logger(__name__)

def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)

    if args and args[0] in ("--help", "help"):
        print(HELP_TEXT)
        return 0

    directory = args[0] if args else "."
    threshold = threshold_from_token(args[1] if len(args) > 1 else None)
    if len(args) > 2:
        log.debug("ignoring extra arguments: %s", args[2:])

    print(format_scan_banner(directory, threshold))
    print()

    result = scan(directory, threshold)
    print(render_report(result, threshold))
    return 0

def run():
    sys.exit(main())
