import gzip
import logging
import zlib

from google.protobuf.message import DecodeError

from .model import (
    Function,
    Label,
    Line,
    Location,
    Mapping,
    Profile,
    Sample,
    ValueType,
)
from .schema import ProfileMessage

logger = logging.getLogger(__name__)


class CorruptInputError(ValueError):
    """
    The input is not gzip, or the decompressed bytes are not a profile.
    """


def decode(path):
    """
    Read a gzip-compressed pprof file into a Profile.

    Errors opening the file (missing, permissions) propagate as OSError,
    anything wrong with the content is a CorruptInputError.
    """
    logger.debug(f"Reading profile '{path}'")
    with open(path, "rb") as fd:
        data = fd.read()
    return decode_bytes(data, source=path)


def decode_bytes(data: bytes, source="<bytes>"):
    """
    Decode an in-memory gzip blob.
    """
    if not data:
        raise CorruptInputError(f"{source} is empty")
    try:
        raw = gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise CorruptInputError(f"{source} is not a gzip stream: {e}") from e
    return parse_profile(raw, source=source)


def parse_profile(raw: bytes, source="<bytes>"):
    message = ProfileMessage()
    try:
        message.ParseFromString(raw)
    except DecodeError as e:
        raise CorruptInputError(f"{source} is not a valid profile: {e}") from e
    profile = profile_from_message(message)
    logger.debug(
        f"Decoded {len(profile.samples)} samples, {len(profile.locations)} locations, "
        f"{len(profile.functions)} functions, {len(profile.string_table)} strings"
    )
    return profile


def value_type(message):
    return ValueType(message.type, message.unit)


def profile_from_message(message):
    """
    Convert a parsed ProfileMessage into the immutable Profile model.
    """
    samples = tuple(
        Sample(
            tuple(sample.location_id),
            tuple(sample.value),
            tuple(Label(lb.key, lb.str, lb.num, lb.num_unit) for lb in sample.label),
        )
        for sample in message.sample
    )
    locations = tuple(
        Location(
            loc.id,
            loc.mapping_id,
            loc.address,
            tuple(Line(line.function_id, line.line) for line in loc.line),
            loc.is_folded,
        )
        for loc in message.location
    )
    functions = tuple(
        Function(fn.id, fn.name, fn.system_name, fn.filename, fn.start_line)
        for fn in message.function
    )
    mappings = tuple(
        Mapping(m.id, m.memory_start, m.memory_limit, m.file_offset, m.filename, m.build_id)
        for m in message.mapping
    )
    return Profile(
        sample_types=tuple(value_type(st) for st in message.sample_type),
        samples=samples,
        mappings=mappings,
        locations=locations,
        functions=functions,
        string_table=tuple(message.string_table),
        period=message.period,
        period_type=value_type(message.period_type),
        time_nanos=message.time_nanos,
        duration_nanos=message.duration_nanos,
        comments=tuple(message.comment),
        default_sample_type=message.default_sample_type,
    )
