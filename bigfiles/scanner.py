from __future__ import annotations
import os
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Iterator, List, Optional
from .config import get_settings
from .logging_utils import get_logger
from .models import FileRecord, ScanResult, SizeThreshold

BATCH_SIZE = 256

log = get_logger(__name__)

def iter_regular_files(root: str) -> Iterator[str]:
    """Yield every regular file below ``root``, depth-first, names in sorted order.

    Symlinks are never followed or reported. Directories that cannot be listed
    and entries that cannot be classified are skipped.
    """
    stack = [root]
    while stack:
        dir_path = stack.pop()
        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log.debug("skip dir %s: %s", dir_path, e)
            continue

        subdirs: List[str] = []
        for entry in entries:
            try:
                if entry.is_symlink():
                    continue
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                elif entry.is_file(follow_symlinks=False):
                    yield entry.path
            except OSError as e:
                log.debug("skip entry %s: %s", entry.path, e)
                continue

        # reversed so the stack pops them in name order
        stack.extend(reversed(subdirs))

def _batches(paths: List[str], size: int) -> Iterator[List[str]]:
    for i in range(0, len(paths), size):
        yield paths[i:i + size]

def filter_by_size(paths: Iterable[str], min_bytes: int, workers: int = 1) -> List[FileRecord]:
    """Stat ``paths`` on a thread pool and keep those with size >= ``min_bytes``.

    The returned list is in completion order, not discovery order.
    """
    paths = list(paths)
    found: List[FileRecord] = []
    lock = threading.Lock()

    def check(batch: List[str]):
        for p in batch:
            try:
                sz = int(os.stat(p).st_size)
            except OSError as e:
                log.debug("skip file %s: %s", p, e)
                continue
            if sz >= min_bytes:
                rec = FileRecord(path=p, size_bytes=sz)
                with lock:
                    found.append(rec)

    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = [executor.submit(check, b) for b in _batches(paths, BATCH_SIZE)]
        for f in futures:
            f.result()
    return found

def scan(root: str, threshold: SizeThreshold, workers: Optional[int] = None) -> ScanResult:
    if workers is None:
        workers = get_settings().resolved_workers()

    t0 = time.perf_counter()
    files = list(iter_regular_files(root))
    log.info("walked %s: %d files, filtering with %d workers", root, len(files), workers)
    records = filter_by_size(files, threshold.bytes, workers)
    elapsed = time.perf_counter() - t0

    log.info("matched %d of %d files in %.2fs", len(records), len(files), elapsed)
    return ScanResult(
        records=records,
        scanned_count=len(files),
        elapsed_sec=elapsed,
        root=root,
    )
