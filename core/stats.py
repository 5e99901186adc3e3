from __future__ import annotations

import math
import re
from typing import Dict, Iterable, List, Optional

import pandas as pd

from core.formatting import format_number
from core.models import Stats

_DELIMITERS = re.compile(r"[,\s]+")


def parse_values(text: str) -> List[float]:
    """Split comma/whitespace separated text into numbers.

    Tokens that do not parse are dropped rather than treated as zero, so a
    stray letter does not skew the sample.
    """

    if not text:
        return []
    tokens = [t for t in _DELIMITERS.split(str(text).strip()) if t]
    if not tokens:
        return []
    values = pd.to_numeric(pd.Series(tokens, dtype="object"), errors="coerce")
    return [float(v) for v in values.dropna() if math.isfinite(v)]


def compute_statistics(values: Iterable[float]) -> Optional[Stats]:
    """Descriptive statistics for ``values``; ``None`` when there is nothing to describe."""

    s = pd.Series(list(values), dtype="float64")
    if s.empty:
        return None

    n = int(s.size)
    total = float(s.sum())
    mean = total / n
    ordered = s.sort_values(ignore_index=True)
    if n % 2 == 0:
        median = (float(ordered[n // 2 - 1]) + float(ordered[n // 2])) / 2
    else:
        median = float(ordered[n // 2])

    counts = s.value_counts()
    max_freq = int(counts.max())
    modes = sorted(float(v) for v in counts[counts == max_freq].index)
    mode = "None" if max_freq == 1 else ", ".join(format_number(m) for m in modes)

    squared = float(((s - mean) ** 2).sum())
    variance = squared / n
    sample_variance = squared / (n - 1) if n > 1 else None

    return Stats(
        n=n,
        total=total,
        mean=mean,
        median=median,
        mode=mode,
        modes=modes if max_freq > 1 else [],
        minimum=float(ordered.iloc[0]),
        maximum=float(ordered.iloc[-1]),
        range=float(ordered.iloc[-1] - ordered.iloc[0]),
        variance=variance,
        std_dev=math.sqrt(variance),
        sample_variance=sample_variance,
        sample_std_dev=math.sqrt(sample_variance) if sample_variance is not None else None,
    )


def statistics_from_text(text: str) -> Optional[Stats]:
    return compute_statistics(parse_values(text))


def as_display(stats: Optional[Stats]) -> Dict[str, str]:
    """Formatted strings for each statistic; ``"-"`` where a value is unavailable."""

    if stats is None:
        return {"n": "-"}

    def fmt(v):
        return "-" if v is None else format_number(v)

    return {
        "n": str(stats.n),
        "sum": fmt(stats.total),
        "mean": fmt(stats.mean),
        "median": fmt(stats.median),
        "mode": stats.mode,
        "range": fmt(stats.range),
        "min": fmt(stats.minimum),
        "max": fmt(stats.maximum),
        "variance": fmt(stats.variance),
        "std_dev": fmt(stats.std_dev),
        "sample_variance": fmt(stats.sample_variance),
        "sample_std_dev": fmt(stats.sample_std_dev),
    }
