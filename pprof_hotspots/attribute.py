"""
Flat and cumulative attribution of sample values to functions.

Functions are keyed by their resolved name, so two function ids sharing a
name land in the same row. Cumulative value is credited once per sample per
function no matter how many frames of it are on the stack, which keeps
recursive chains from being counted depth times.
"""

import logging

from .symbols import SymbolIndex

logger = logging.getLogger(__name__)


class Hotspot:
    """
    Running flat / cumulative totals for one function.
    """

    __slots__ = ("flat", "cum")

    def __init__(self, flat=0, cum=0):
        self.flat = flat
        self.cum = cum

    def __eq__(self, other):
        if not isinstance(other, Hotspot):
            return NotImplemented
        return (self.flat, self.cum) == (other.flat, other.cum)

    def __repr__(self):
        return f"Hotspot(flat={self.flat}, cum={self.cum})"


def attribute(profile, index=None):
    """
    Attribute every sample in the profile.

    Args:
        profile: a decoded Profile.
        index: an existing SymbolIndex for the profile, built if not given.

    Returns:
        dict of function name -> Hotspot
    """
    if index is None:
        index = SymbolIndex(profile)
    return attribute_samples(profile.samples, index)


def attribute_samples(samples, index):
    """
    Attribute an iterable of samples. Partial results from disjoint sample
    sets can be combined with merge_attributions.
    """
    hotspots = {}
    skipped = 0
    for sample in samples:
        if not sample.location_ids:
            continue

        value = sample.values[0] if sample.values else 0

        # The leaf is where the time was actually spent
        leaf = index.function_name_at(sample.location_ids[0])
        if leaf is not None:
            hotspots.setdefault(leaf, Hotspot()).flat += value

        seen = set()
        for location_id in sample.location_ids:
            name = index.function_name_at(location_id)
            if name is None:
                skipped += 1
                continue
            if name in seen:
                continue
            seen.add(name)
            hotspots.setdefault(name, Hotspot()).cum += value

    if skipped:
        logger.debug(f"Skipped {skipped} frames with unresolved location or function")
    return hotspots


def merge_attributions(*parts):
    """
    Sum several name -> Hotspot maps into a new one.
    """
    merged = {}
    for part in parts:
        for name, hotspot in part.items():
            total = merged.setdefault(name, Hotspot())
            total.flat += hotspot.flat
            total.cum += hotspot.cum
    return merged
