"""packetio codec implementations."""

from collections.abc import Callable
from typing import Any

from .base import Codec, Decodable, Encodable
from .json_codec import JSONCodec
from .model_codec import ModelCodec
from .protobuf_codec import ProtobufCodec
from .raw_codec import BytesCodec, RecordCodec
from .struct_codec import StructCodec

__all__ = [
    "Codec",
    "Encodable",
    "Decodable",
    "BytesCodec",
    "JSONCodec",
    "ModelCodec",
    "ProtobufCodec",
    "RecordCodec",
    "StructCodec",
    "register_codec",
    "get_codec",
    "list_codecs",
]


# Codec registry
_CODECS: dict[str, Callable[..., Codec[Any]]] = {}


def register_codec(name: str, factory: Callable[..., Codec[Any]]) -> None:
    """Register a codec class or factory under a name."""
    _CODECS[name] = factory


def get_codec(name: str, *args: Any, **kwargs: Any) -> Codec[Any]:
    """Get a codec instance by name.

    Extra arguments are passed to the factory, e.g.
    ``get_codec("struct", ">BH")`` or ``get_codec("model", MyModel)``.
    """
    if name not in _CODECS:
        raise ValueError(f"Unsupported codec: {name!r}")
    return _CODECS[name](*args, **kwargs)


def list_codecs() -> list[str]:
    """List all registered codec names."""
    return list(_CODECS.keys())


# Register default codecs
register_codec("bytes", BytesCodec)
register_codec("json", JSONCodec)
register_codec("struct", StructCodec)
register_codec("record", RecordCodec)
register_codec("model", ModelCodec)
register_codec("protobuf", ProtobufCodec)
