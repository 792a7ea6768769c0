import collections

import numpy as np
import pandas as pd

HotspotRow = collections.namedtuple("HotspotRow", ["function", "flat", "cum"])

FRAME_COLUMNS = ["function", "flat", "flat_pct", "sum_pct", "cum", "cum_pct"]


def rank(attributed, max_entries):
    """
    Order attributed functions by flat value and keep the top max_entries.

    Ties on flat are broken by function name ascending so output does not
    depend on dict ordering.
    """
    if max_entries < 0:
        raise ValueError(f"max_entries must be >= 0, got {max_entries}")
    rows = sorted(
        (HotspotRow(name, hotspot.flat, hotspot.cum) for name, hotspot in attributed.items()),
        key=lambda row: (-row.flat, row.function),
    )
    return rows[:max_entries]


def hotspot_frame(rows):
    """
    Build the report table for already ranked rows.

    Percentages are relative to the flat sum of these rows only (the top-N),
    not the whole profile. sum_pct is the running total of flat_pct.
    """
    df = pd.DataFrame(list(rows), columns=["function", "flat", "cum"])
    df = df.astype({"flat": "int64", "cum": "int64"})

    total_flat = df["flat"].sum()
    if total_flat == 0:
        df["flat_pct"] = 0.0
        df["cum_pct"] = 0.0
    else:
        df["flat_pct"] = df["flat"] * 100.0 / total_flat
        df["cum_pct"] = df["cum"] * 100.0 / total_flat

    df["sum_pct"] = np.cumsum(df["flat_pct"].to_numpy(dtype=float))
    return df[FRAME_COLUMNS].reset_index(drop=True)
