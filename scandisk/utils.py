from __future__ import annotations
import math

# Checked largest first; anything below 1 KB falls back to plain bytes.
UNITS = [
    ("GB", 1024 ** 3),
    ("MB", 1024 ** 2),
    ("KB", 1024),
]

def round_half_up(value: float, places: int = 2) -> float:
    pow_ = 10.0 ** places
    digit = pow_ * value
    frac = digit - math.floor(digit)
    if frac >= 0.5:
        rounded = math.ceil(digit)
    else:
        rounded = math.floor(digit)
    return rounded / pow_

def _short_float(x: float) -> str:
    # 1.0 -> "1", 1.5 -> "1.5", 2.25 -> "2.25"
    return f"{x:.2f}".rstrip("0").rstrip(".")

def format_size(num: int) -> str:
    for symbol, multiplier in UNITS:
        if multiplier <= num:
            return f"{_short_float(round_half_up(num / multiplier, 2))} {symbol}"
    return f"{int(num)}  B"

def ceil_to_block(num: int, block_size: int) -> int:
    """Smallest multiple of block_size that is >= num."""
    if num <= 0:
        return 0
    return -(-num // block_size) * block_size
