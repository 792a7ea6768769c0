"""
In-memory profile model. All text fields are indices into string_table.

A Location may carry several lines when frames were inlined; only lines[0]
(the innermost) is used for attribution, the rest are kept but ignored.
"""

import collections

ValueType = collections.namedtuple("ValueType", ["type", "unit"])

Label = collections.namedtuple("Label", ["key", "str", "num", "num_unit"])

Line = collections.namedtuple("Line", ["function_id", "line"])

Location = collections.namedtuple(
    "Location", ["id", "mapping_id", "address", "lines", "is_folded"]
)

Function = collections.namedtuple(
    "Function", ["id", "name", "system_name", "filename", "start_line"]
)

Mapping = collections.namedtuple(
    "Mapping",
    ["id", "memory_start", "memory_limit", "file_offset", "filename", "build_id"],
)

# location_ids are ordered innermost (leaf) first
Sample = collections.namedtuple("Sample", ["location_ids", "values", "labels"])

Profile = collections.namedtuple(
    "Profile",
    [
        "sample_types",
        "samples",
        "mappings",
        "locations",
        "functions",
        "string_table",
        "period",
        "period_type",
        "time_nanos",
        "duration_nanos",
        "comments",
        "default_sample_type",
    ],
)
