"""Fixed-layout binary record codec for packetio."""

import dataclasses
import struct
from collections.abc import Callable
from typing import Any

from ..errors import DecodingError, EncodingError
from .base import Codec


class StructCodec(Codec[Any]):
    """Codec for records with a fixed binary layout described by a struct format.

    Values may be tuples, NamedTuples or dataclass instances; their fields are
    packed in declaration order. Decoding rebuilds the record through
    ``factory`` (``tuple`` by default), called with one positional argument per
    field.

    Example:
        >>> codec = StructCodec(">BH")
        >>> codec.encode((1, 2))
        b'\\x01\\x00\\x02'
    """

    def __init__(self, fmt: str, factory: Callable[..., Any] | None = None):
        """Initialize codec.

        Args:
            fmt: ``struct`` format string; prefix with ``>`` or ``<`` for a
                platform-independent layout
            factory: Callable building the decoded record from its fields
        """
        try:
            self._struct = struct.Struct(fmt)
        except struct.error as exc:
            raise ValueError(f"Invalid struct format {fmt!r}: {exc}") from exc
        self.factory = factory

    @property
    def format(self) -> str:
        return self._struct.format

    @property
    def size(self) -> int:
        """Exact payload size produced and accepted by this codec."""
        return self._struct.size

    def encode(self, value: Any) -> bytes:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            fields = dataclasses.astuple(value)
        elif isinstance(value, tuple):
            fields = value
        else:
            raise EncodingError(f"Cannot pack {type(value).__name__}: expected a tuple or dataclass")

        try:
            return self._struct.pack(*fields)
        except struct.error as exc:
            raise EncodingError(f"Cannot pack {value!r} as {self.format!r}: {exc}") from exc

    def decode(self, data: bytes) -> Any:
        if len(data) != self.size:
            raise DecodingError(f"Expected {self.size} bytes for {self.format!r}, got {len(data)}")

        fields = self._struct.unpack(data)
        if self.factory is None:
            return fields
        try:
            return self.factory(*fields)
        except (TypeError, ValueError) as exc:
            raise DecodingError(f"Cannot build record from {fields!r}: {exc}") from exc
