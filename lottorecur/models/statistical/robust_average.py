"""
lottorecur/models/statistical/robust_average.py
Outlier-resistant central tendency for small, noisy gap samples.

Samples below ``min_iqr_sample`` values use a trimmed mean (quartiles are
meaningless on 1-3 points); larger samples keep only values inside the
Tukey fences [Q1 - k*IQR, Q3 + k*IQR] and average those.
"""
from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

TRIM_FRACTION = 0.2
IQR_MULTIPLIER = 1.5
MIN_IQR_SAMPLE = 4


def _sorted_array(values: Sequence[float]) -> np.ndarray:
    if len(values) == 0:
        raise ValueError("Cannot average an empty sample.")
    return np.sort(np.asarray(values, dtype=float))


def median(values: Sequence[float]) -> float:
    return float(np.median(_sorted_array(values)))


def trimmed_mean(values: Sequence[float], trim_fraction: float = TRIM_FRACTION) -> float:
    """
    Drop max(1, floor(n * trim_fraction)) values from each end and average the rest.
    The window is clamped so at least one value always remains.
    """
    arr = _sorted_array(values)
    n = len(arr)
    trim = max(1, int(n * trim_fraction))
    start = min(trim, max(0, n - 1))
    end = max(start + 1, n - trim)
    return float(np.mean(arr[start:end]))


def quartiles(values: Sequence[float]) -> tuple[float, float]:
    """
    (Q1, Q3) as medians of the lower and upper halves.
    The overall median is excluded from both halves when n is odd.
    """
    arr = _sorted_array(values)
    n = len(arr)
    if n < 2:
        raise ValueError("Quartiles need at least 2 values.")
    mid = n // 2
    lower = arr[:mid]
    upper = arr[mid:] if n % 2 == 0 else arr[mid + 1:]
    return float(np.median(lower)), float(np.median(upper))


def iqr_filtered_mean(
    values: Sequence[float],
    k: float = IQR_MULTIPLIER,
    trim_fraction: float = TRIM_FRACTION,
) -> float:
    """
    Mean of the values inside [Q1 - k*IQR, Q3 + k*IQR].

    IQR <= 0 falls back to the plain mean of the whole sample; an empty
    fenced set falls back to the trimmed mean of the whole sample.
    """
    arr = _sorted_array(values)
    q1, q3 = quartiles(arr)
    iqr = q3 - q1
    if iqr <= 0:
        return float(np.mean(arr))

    lower_fence = q1 - k * iqr
    upper_fence = q3 + k * iqr
    kept = arr[(arr >= lower_fence) & (arr <= upper_fence)]
    if kept.size == 0:
        return trimmed_mean(arr, trim_fraction)
    return float(np.mean(kept))


def robust_average(
    values: Sequence[float],
    min_iqr_sample: int = MIN_IQR_SAMPLE,
    k: float = IQR_MULTIPLIER,
    trim_fraction: float = TRIM_FRACTION,
) -> float:
    """Typical gap of a sample: trimmed mean when small, IQR-filtered mean otherwise."""
    if len(values) < min_iqr_sample:
        return trimmed_mean(values, trim_fraction)
    return iqr_filtered_mean(values, k=k, trim_fraction=trim_fraction)


def round_half_up(value: float) -> int:
    """Round to the nearest whole day with halves going up (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))
