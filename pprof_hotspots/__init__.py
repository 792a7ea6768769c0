"""
Ranked flat / cumulative hotspot reports from gzip-compressed pprof profiles.

    profile = decode("cpu.pprof")
    for function, flat, cum in top_hotspots(profile, 10):
        ...
"""

from .attribute import Hotspot, attribute, attribute_samples, merge_attributions
from .decode import CorruptInputError, decode, decode_bytes
from .rank import HotspotRow, hotspot_frame, rank
from .report import sample_type_descriptions
from .symbols import SymbolIndex

__version__ = "0.1.0"


def sampling_period_nanos(profile):
    return profile.period


def top_hotspots(profile, max_entries=10):
    """
    The max_entries functions with the highest flat value, as HotspotRow
    (function, flat, cum) tuples.
    """
    return rank(attribute(profile), max_entries)


__all__ = [
    "CorruptInputError",
    "Hotspot",
    "HotspotRow",
    "SymbolIndex",
    "attribute",
    "attribute_samples",
    "decode",
    "decode_bytes",
    "hotspot_frame",
    "merge_attributions",
    "rank",
    "sample_type_descriptions",
    "sampling_period_nanos",
    "top_hotspots",
]
