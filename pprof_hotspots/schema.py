"""
The perftools.profiles schema (profile.proto), declared with descriptors so
no protoc step or generated module is needed.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

PACKAGE = "perftools.profiles"

FieldProto = descriptor_pb2.FieldDescriptorProto

INT64 = FieldProto.TYPE_INT64
UINT64 = FieldProto.TYPE_UINT64
BOOL = FieldProto.TYPE_BOOL
STRING = FieldProto.TYPE_STRING
MESSAGE = FieldProto.TYPE_MESSAGE

OPTIONAL = FieldProto.LABEL_OPTIONAL
REPEATED = FieldProto.LABEL_REPEATED

# message name -> [(field name, number, type, label, message type)]
MESSAGES = {
    "Profile": [
        ("sample_type", 1, MESSAGE, REPEATED, "ValueType"),
        ("sample", 2, MESSAGE, REPEATED, "Sample"),
        ("mapping", 3, MESSAGE, REPEATED, "Mapping"),
        ("location", 4, MESSAGE, REPEATED, "Location"),
        ("function", 5, MESSAGE, REPEATED, "Function"),
        ("string_table", 6, STRING, REPEATED, None),
        ("drop_frames", 7, INT64, OPTIONAL, None),
        ("keep_frames", 8, INT64, OPTIONAL, None),
        ("time_nanos", 9, INT64, OPTIONAL, None),
        ("duration_nanos", 10, INT64, OPTIONAL, None),
        ("period_type", 11, MESSAGE, OPTIONAL, "ValueType"),
        ("period", 12, INT64, OPTIONAL, None),
        ("comment", 13, INT64, REPEATED, None),
        ("default_sample_type", 14, INT64, OPTIONAL, None),
        ("doc_url", 15, INT64, OPTIONAL, None),
    ],
    "ValueType": [
        ("type", 1, INT64, OPTIONAL, None),
        ("unit", 2, INT64, OPTIONAL, None),
    ],
    "Sample": [
        ("location_id", 1, UINT64, REPEATED, None),
        ("value", 2, INT64, REPEATED, None),
        ("label", 3, MESSAGE, REPEATED, "Label"),
    ],
    "Label": [
        ("key", 1, INT64, OPTIONAL, None),
        ("str", 2, INT64, OPTIONAL, None),
        ("num", 3, INT64, OPTIONAL, None),
        ("num_unit", 4, INT64, OPTIONAL, None),
    ],
    "Mapping": [
        ("id", 1, UINT64, OPTIONAL, None),
        ("memory_start", 2, UINT64, OPTIONAL, None),
        ("memory_limit", 3, UINT64, OPTIONAL, None),
        ("file_offset", 4, UINT64, OPTIONAL, None),
        ("filename", 5, INT64, OPTIONAL, None),
        ("build_id", 6, INT64, OPTIONAL, None),
        ("has_functions", 7, BOOL, OPTIONAL, None),
        ("has_filenames", 8, BOOL, OPTIONAL, None),
        ("has_line_numbers", 9, BOOL, OPTIONAL, None),
        ("has_inline_frames", 10, BOOL, OPTIONAL, None),
    ],
    "Location": [
        ("id", 1, UINT64, OPTIONAL, None),
        ("mapping_id", 2, UINT64, OPTIONAL, None),
        ("address", 3, UINT64, OPTIONAL, None),
        ("line", 4, MESSAGE, REPEATED, "Line"),
        ("is_folded", 5, BOOL, OPTIONAL, None),
    ],
    "Line": [
        ("function_id", 1, UINT64, OPTIONAL, None),
        ("line", 2, INT64, OPTIONAL, None),
        ("column", 3, INT64, OPTIONAL, None),
    ],
    "Function": [
        ("id", 1, UINT64, OPTIONAL, None),
        ("name", 2, INT64, OPTIONAL, None),
        ("system_name", 3, INT64, OPTIONAL, None),
        ("filename", 4, INT64, OPTIONAL, None),
        ("start_line", 5, INT64, OPTIONAL, None),
    ],
}


def build_file_descriptor():
    """
    Assemble the FileDescriptorProto for profile.proto.
    """
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="profile.proto", package=PACKAGE, syntax="proto3"
    )
    for message_name, fields in MESSAGES.items():
        message_proto = file_proto.message_type.add(name=message_name)
        for name, number, field_type, label, type_name in fields:
            field = message_proto.field.add(
                name=name, number=number, type=field_type, label=label
            )
            if type_name:
                field.type_name = f".{PACKAGE}.{type_name}"
    return file_proto


def load_message_class(message_name="Profile"):
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(build_file_descriptor().SerializeToString())
    descriptor = pool.FindMessageTypeByName(f"{PACKAGE}.{message_name}")
    return message_factory.GetMessageClass(descriptor)


ProfileMessage = load_message_class()
