import math
from typing import List, Optional, Sequence

import params


def no_data_bin(thresholds: Sequence[float] = params.BINS) -> int:
    """Bin index reserved for regions without a value (one past the last value bucket)."""
    return len(thresholds) + 1


def is_missing(value) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(value)
    except TypeError:
        return True


def classify(value: Optional[float], thresholds: Sequence[float] = params.BINS) -> int:
    """Map a measurement to its bucket index.

    Returns the index of the first threshold strictly greater than value, or
    len(thresholds) when none is. A value equal to a threshold lands in the
    bucket above it. Missing values get no_data_bin(thresholds).
    """
    if is_missing(value):
        return no_data_bin(thresholds)
    for i, b in enumerate(thresholds):
        if value < b:
            return i
    return len(thresholds)


def bin_color(bin_index: int, colors: Sequence[str] = params.BIN_COLORS,
              no_data_color: str = params.NO_DATA_COLOR) -> str:
    if 0 <= bin_index < len(colors):
        return colors[bin_index]
    return no_data_color


def legend_labels(thresholds: Sequence[float] = params.BINS) -> List[str]:
    """Labels for every value bucket: '< 10', '10 – 14', ..., '≥ 32'."""
    labels = [
        f"< {_num(b)}" if i == 0 else f"{_num(thresholds[i - 1])} – {_num(b)}"
        for i, b in enumerate(thresholds)
    ]
    labels.append(f"≥ {_num(thresholds[-1])}")
    return labels


def legend_items(thresholds: Sequence[float] = params.BINS,
                 colors: Sequence[str] = params.BIN_COLORS) -> List[dict]:
    items = [{"label": label, "color": bin_color(i, colors)}
             for i, label in enumerate(legend_labels(thresholds))]
    items.append({"label": params.NO_DATA_LABEL, "color": params.NO_DATA_COLOR})
    return items


def temp_str(value: Optional[float], digits: int = 2) -> str:
    """Format a temperature value, 'N/A' when missing."""
    if is_missing(value):
        return "N/A"
    return f"{value:.{digits}f}"


def diff_str(current: Optional[float], baseline: Optional[float]) -> str:
    if is_missing(current) or is_missing(baseline):
        return "N/A"
    return f"{current - baseline:.2f}"


def _num(x: float) -> str:
    # 10.0 -> '10', 10.5 -> '10.5'
    return f"{x:g}"
