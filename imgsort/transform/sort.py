from __future__ import annotations

from typing import Callable, Dict, List

from ..image.types import PixelBuffer, Rgb


def brightness(pixel: Rgb) -> int:
    """Integer average of the three channels."""
    r, g, b = pixel
    return (r + g + b) // 3


def _sort_builtin(column: List[Rgb]) -> List[Rgb]:
    return sorted(column, key=brightness)


def _sort_selection(column: List[Rgb]) -> List[Rgb]:
    """Quadratic in-place selection sort, the reference ordering."""
    values = list(column)
    for i in range(len(values)):
        for j in range(i + 1, len(values)):
            if brightness(values[j]) < brightness(values[i]):
                values[i], values[j] = values[j], values[i]
    return values


ALGORITHMS: Dict[str, Callable[[List[Rgb]], List[Rgb]]] = {
    "builtin": _sort_builtin,
    "selection": _sort_selection,
}


def sort_columns(buffer: PixelBuffer, algorithm: str = "builtin") -> PixelBuffer:
    """Return a copy of ``buffer`` with every column ordered by ascending brightness."""
    sorter = ALGORITHMS.get(algorithm)
    if sorter is None:
        raise ValueError(f"Unknown sort algorithm '{algorithm}' (choose from {', '.join(sorted(ALGORITHMS))})")
    result = buffer.copy()
    if buffer.height <= 1:
        return result
    for x in range(buffer.width):
        result.set_column(x, sorter(buffer.column(x)))
    return result


def is_column_sorted(buffer: PixelBuffer) -> bool:
    for x in range(buffer.width):
        levels = [brightness(p) for p in buffer.column(x)]
        if any(a > b for a, b in zip(levels, levels[1:])):
            return False
    return True
