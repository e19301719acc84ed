"""Pydantic model codec implementation for packetio."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import DecodingError, EncodingError
from .base import Codec

ModelT = TypeVar("ModelT", bound=BaseModel)


class ModelCodec(Codec[ModelT], Generic[ModelT]):
    """JSON codec for pydantic models of a single type."""

    def __init__(self, model_cls: type[ModelT]):
        self.model_cls = model_cls

    def encode(self, value: ModelT) -> bytes:
        if not isinstance(value, self.model_cls):
            raise EncodingError(f"Expected {self.model_cls.__name__}, got {type(value).__name__}")
        try:
            return value.model_dump_json().encode("utf-8")
        except PydanticSerializationError as exc:
            raise EncodingError(f"Cannot serialize {self.model_cls.__name__}: {exc}") from exc

    def decode(self, data: bytes) -> ModelT:
        try:
            return self.model_cls.model_validate_json(bytes(data))
        except ValidationError as exc:
            raise DecodingError(f"Invalid {self.model_cls.__name__} payload: {exc}") from exc
