from __future__ import annotations
import math
from typing import Optional, Tuple
from .logging_utils import get_logger
from .models import SizeThreshold, SizeUnit

DEFAULT_SIZE_MB = 100.0
BYTES_PER_MB = 1024 * 1024
MAX_BYTES = 2 ** 64 - 1

# Checked in order: "gb" must win over "g", "mb" over "m".
SUFFIXES = [
    ("gb", 1024.0, SizeUnit.GB),
    ("g", 1024.0, SizeUnit.GB),
    ("mb", 1.0, SizeUnit.MB),
    ("m", 1.0, SizeUnit.MB),
]

log = get_logger(__name__)

def _parse_number(text: str) -> Optional[float]:
    # float() tolerates padding and digit separators; a size token does not.
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None

def parse_size(token: str) -> Tuple[float, SizeUnit]:
    """Turn a size token such as ``"1GB"``, ``"500m"`` or ``"100"`` into megabytes.

    Returns ``(megabytes, display_unit)``. A numeric part that does not parse
    yields ``(100.0, SizeUnit.MB)`` whatever suffix was given; no error is raised.
    """
    text = token.lower()
    num, multiplier, unit = text, 1.0, SizeUnit.MB
    for suffix, mult, u in SUFFIXES:
        if text.endswith(suffix):
            num, multiplier, unit = text[:-len(suffix)], mult, u
            break

    value = _parse_number(num)
    if value is None:
        log.debug("unparsable size token %r, using %s MB", token, DEFAULT_SIZE_MB)
        return DEFAULT_SIZE_MB, SizeUnit.MB
    return value * multiplier, unit

def megabytes_to_bytes(megabytes: float) -> int:
    """Truncate to whole bytes, saturating to the unsigned 64-bit range.

    NaN and negative sizes become 0; anything past the top, inf included,
    becomes ``MAX_BYTES``.
    """
    if math.isnan(megabytes) or megabytes <= 0:
        return 0
    value = megabytes * BYTES_PER_MB
    if value >= MAX_BYTES:
        return MAX_BYTES
    return int(value)

def threshold_from_token(token: Optional[str]) -> SizeThreshold:
    if token is None:
        megabytes, unit = DEFAULT_SIZE_MB, SizeUnit.MB
    else:
        megabytes, unit = parse_size(token)
    return SizeThreshold(bytes=megabytes_to_bytes(megabytes), display_unit=unit)
