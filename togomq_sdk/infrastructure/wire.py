"""Wire schema for the ``mq.v1.MqService`` gRPC contract.

The protobuf descriptors are assembled from a ``FileDescriptorProto`` at import
time and registered in a private descriptor pool, so no generated ``_pb2``
modules are needed. Converters between domain objects and wire messages live
here as well.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from ..domain.models import Message, SubscribeOptions

PACKAGE = "mq.v1"
SERVICE = "MqService"
PUB_METHOD = f"/{PACKAGE}.{SERVICE}/Pub"
SUB_METHOD = f"/{PACKAGE}.{SERVICE}/Sub"

_Field = descriptor_pb2.FieldDescriptorProto


def _add_field(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    field_type: int,
    label: int = _Field.LABEL_OPTIONAL,
    type_name: str | None = None,
) -> None:
    field = message.field.add(name=name, number=number, type=field_type, label=label)
    if type_name:
        field.type_name = type_name


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="mq/v1/mq.proto", package=PACKAGE, syntax="proto3"
    )

    mq_message = file_proto.message_type.add(name="MqMessage")
    _add_field(mq_message, "topic", 1, _Field.TYPE_STRING)
    _add_field(mq_message, "uuid", 2, _Field.TYPE_STRING)
    _add_field(mq_message, "body", 3, _Field.TYPE_BYTES)
    # map<string, string> is encoded as a repeated nested entry message
    entry = mq_message.nested_type.add(name="VariablesEntry")
    entry.options.map_entry = True
    _add_field(entry, "key", 1, _Field.TYPE_STRING)
    _add_field(entry, "value", 2, _Field.TYPE_STRING)
    _add_field(
        mq_message,
        "variables",
        4,
        _Field.TYPE_MESSAGE,
        label=_Field.LABEL_REPEATED,
        type_name=f".{PACKAGE}.MqMessage.VariablesEntry",
    )
    _add_field(mq_message, "postpone", 5, _Field.TYPE_INT64)
    _add_field(mq_message, "retention", 6, _Field.TYPE_INT64)

    for name in ("PubRequest", "SubResponse"):
        batch = file_proto.message_type.add(name=name)
        _add_field(
            batch,
            "messages",
            1,
            _Field.TYPE_MESSAGE,
            label=_Field.LABEL_REPEATED,
            type_name=f".{PACKAGE}.MqMessage",
        )

    pub_response = file_proto.message_type.add(name="PubResponse")
    _add_field(pub_response, "messages_received", 1, _Field.TYPE_INT64)

    sub_request = file_proto.message_type.add(name="SubRequest")
    _add_field(sub_request, "topic", 1, _Field.TYPE_STRING)
    _add_field(sub_request, "batch", 2, _Field.TYPE_INT64)
    _add_field(sub_request, "speed_per_sec", 3, _Field.TYPE_INT64)

    service = file_proto.service.add(name=SERVICE)
    service.method.add(
        name="Pub",
        input_type=f".{PACKAGE}.PubRequest",
        output_type=f".{PACKAGE}.PubResponse",
    )
    service.method.add(
        name="Sub",
        input_type=f".{PACKAGE}.SubRequest",
        output_type=f".{PACKAGE}.SubResponse",
        server_streaming=True,
    )
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())


def _message_class(name: str) -> type:
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.{name}"))


MqMessage = _message_class("MqMessage")
PubRequest = _message_class("PubRequest")
PubResponse = _message_class("PubResponse")
SubRequest = _message_class("SubRequest")
SubResponse = _message_class("SubResponse")


def to_wire(message: Message):
    """Convert a domain message to ``MqMessage``.

    Variables, postpone and retention are only set when non-empty/non-zero.
    """
    wire = MqMessage(topic=message.topic, body=message.body_bytes)
    if message.variables:
        wire.variables.update(message.variables)
    if message.postpone > 0:
        wire.postpone = message.postpone
    if message.retention > 0:
        wire.retention = message.retention
    return wire


def from_wire(wire) -> Message:
    """Convert a received ``MqMessage`` to a domain message."""
    message = Message(wire.topic, bytes(wire.body))
    if wire.uuid:
        message.set_uuid(wire.uuid)
    variables = dict(wire.variables)
    if variables:
        message.with_variables(variables)
    return message


def build_pub_request(messages: list[Message]):
    return PubRequest(messages=[to_wire(m) for m in messages])


def build_sub_request(options: SubscribeOptions):
    """Build ``SubRequest``; batch and speed are only sent when non-zero."""
    request = SubRequest(topic=options.topic)
    if options.batch > 0:
        request.batch = options.batch
    if options.speed_per_sec > 0:
        request.speed_per_sec = options.speed_per_sec
    return request
