from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List

class SizeUnit(Enum):
    MB = "MB"
    GB = "GB"

    @property
    def label(self) -> str:
        return self.value

    @property
    def divisor(self) -> int:
        return 1024 ** 3 if self is SizeUnit.GB else 1024 ** 2

@dataclass(frozen=True)
class FileRecord:
    path: str
    size_bytes: int

@dataclass(frozen=True)
class SizeThreshold:
    bytes: int
    display_unit: SizeUnit = SizeUnit.MB

@dataclass
class ScanResult:
    records: List[FileRecord] = field(default_factory=list)
    scanned_count: int = 0       # regular files classified, matched or not
    elapsed_sec: float = 0.0
    root: str = ""
