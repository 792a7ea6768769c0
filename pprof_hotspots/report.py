"""
Text and CSV rendering of a ranked hotspot table.
"""

import pandas as pd

from .symbols import SymbolIndex

ROW_FORMAT = "%-8s %-7s %-7s %-8s %-7s  %s"


def to_seconds(value, period):
    """
    Sample value times the sampling period (nanoseconds), in seconds.
    """
    return value * period / 1_000_000_000.0


def sample_type_descriptions(profile):
    """
    (name, unit) for each declared sample type, in declaration order.
    """
    index = SymbolIndex(profile)
    return [
        (index.resolve_string(st.type), index.resolve_string(st.unit))
        for st in profile.sample_types
    ]


def format_summary(profile):
    lines = [
        "Profile Summary:",
        "----------------",
        f"Sampling Period: {profile.period / 1_000_000.0:.2f} ms",
        "",
        "Sample Types:",
        "-------------",
    ]
    for name, unit in sample_type_descriptions(profile):
        lines.append(f"- {name:<15} (unit: {unit})")
    return "\n".join(lines)


def format_hotspots(df: pd.DataFrame, period):
    """
    Fixed width table: flat time, flat%, running flat%, cum time, cum%, name.
    """
    lines = [
        f"Top {len(df)} Hotspots:",
        "---------------",
        ROW_FORMAT % ("flat", "flat%", "sum%", "cum", "cum%", "Function"),
        ROW_FORMAT % ("-" * 8, "-" * 7, "-" * 7, "-" * 8, "-" * 7, "-" * 10),
    ]
    for row in df.itertuples(index=False):
        lines.append(
            ROW_FORMAT
            % (
                f"{to_seconds(row.flat, period):.2f}s",
                f"{row.flat_pct:.2f}%",
                f"{row.sum_pct:.2f}%",
                f"{to_seconds(row.cum, period):.2f}s",
                f"{row.cum_pct:.2f}%",
                row.function,
            )
        )
    return "\n".join(lines)


def write_csv(df: pd.DataFrame, period, path):
    """
    Save the ranked table with the flat / cum columns also given in seconds.
    """
    df = df.copy()
    df["flat_seconds"] = to_seconds(df["flat"], period)
    df["cum_seconds"] = to_seconds(df["cum"], period)
    df.to_csv(path, index=False)
    return path
