"""JSON codec implementation for packetio."""

import json
from typing import Any

from ..errors import DecodingError, EncodingError
from .base import Codec


def _check_lossless(value: Any) -> None:
    """Reject values JSON would silently change (non-str keys, tuples)."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(f"JSON object keys must be str, got {type(key).__name__} key {key!r}")
            _check_lossless(item)
    elif isinstance(value, tuple):
        raise EncodingError("Tuples do not round-trip through JSON; use a list")
    elif isinstance(value, list):
        for item in value:
            _check_lossless(item)


class JSONCodec(Codec[Any]):
    """JSON codec for dicts, lists and scalars."""

    def encode(self, value: Any) -> bytes:
        """Encode a value to JSON bytes.

        Args:
            value: JSON-compatible data (dict with str keys, list, str,
                number, bool, None)

        Returns:
            Compact UTF-8 encoded JSON with sorted keys
        """
        _check_lossless(value)
        try:
            text = json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"Value is not JSON serializable: {exc}") from exc
        return text.encode("utf-8")

    def decode(self, data: bytes) -> Any:
        """Decode JSON bytes to a value.

        Args:
            data: UTF-8 encoded JSON bytes

        Returns:
            Decoded data
        """
        try:
            return json.loads(bytes(data).decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DecodingError(f"Invalid JSON payload: {exc}") from exc
