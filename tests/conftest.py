import gzip

import pytest

from pprof_hotspots.decode import profile_from_message
from pprof_hotspots.schema import ProfileMessage


def build_message(
    strings,
    functions=(),
    locations=(),
    samples=(),
    period=10_000_000,
    sample_types=((1, 2),),
):
    """
    functions: (id, name index) pairs
    locations: (id, [function ids]) pairs, innermost line first
    samples: ([location ids], [values]) pairs
    sample_types: (type index, unit index) pairs
    """
    message = ProfileMessage()
    message.string_table.extend(strings)
    message.period = period
    for type_index, unit_index in sample_types:
        message.sample_type.add(type=type_index, unit=unit_index)
    for function_id, name_index in functions:
        message.function.add(id=function_id, name=name_index)
    for location_id, function_ids in locations:
        location = message.location.add(id=location_id)
        for function_id in function_ids:
            location.line.add(function_id=function_id, line=1)
    for location_ids, values in samples:
        sample = message.sample.add()
        sample.location_id.extend(location_ids)
        sample.value.extend(values)
    return message


@pytest.fixture
def make_profile():
    """
    Build a Profile model without touching disk.
    """

    def make(*args, **kwargs):
        return profile_from_message(build_message(*args, **kwargs))

    return make


@pytest.fixture
def write_pprof(tmp_path):
    """
    Write gzip-compressed bytes (a message or raw payload) to a .pprof file.
    """

    def write(payload, name="profile.pprof"):
        if not isinstance(payload, bytes):
            payload = payload.SerializeToString()
        path = tmp_path / name
        path.write_bytes(gzip.compress(payload))
        return str(path)

    return write


@pytest.fixture
def example_message():
    """
    f is called from g (sample A, value 5), g also runs on its own (sample B,
    value 3). Sampled every 10ms.
    """
    return build_message(
        strings=["", "cpu", "nanoseconds", "f", "g"],
        functions=[(1, 3), (2, 4)],
        locations=[(10, [1]), (20, [2])],
        samples=[([10, 20], [5]), ([20], [3])],
        period=10_000_000,
    )


@pytest.fixture
def example_profile(example_message):
    return profile_from_message(example_message)
