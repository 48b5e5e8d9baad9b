"""Type definitions for fetchgen code generation.

This module provides:
- Descriptor models (Param, MediaTypeDef, ResponseDef, OperationDescriptor)
  describing one REST operation in already-resolved form
- OperationNames, the bundle of names derived once per operation
- ResponseParsing, the closed classification of response parsing strategies
"""

import dataclasses
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from fetchgen.exceptions import DescriptorError

__all__ = [
    'Verb',
    'Param',
    'MediaTypeDef',
    'ResponseDef',
    'OperationDescriptor',
    'OperationNames',
    'ResponseParsing',
    'is_json_media_type',
]

Verb = Literal['get', 'post', 'put', 'patch', 'delete']


def is_json_media_type(media_type: str) -> bool:
    return 'application/json' in media_type


class _Descriptor(BaseModel):
    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class Param(_Descriptor):
    """A single operation parameter.

    Attributes:
        name: The parameter name as it appears on the wire.
        type: An already-resolved type expression.
        required: Whether the caller must supply the parameter.
        description: Optional human-readable description.
        media_type: Request content type; only meaningful for the body param.
    """

    name: str
    type: str
    required: bool = False
    description: str | None = None
    media_type: str | None = None


class MediaTypeDef(_Descriptor):
    media_type: str
    type: str = ''


class ResponseDef(_Descriptor):
    """Responses declared for one status code.

    ``code`` is a numeric string or ``'default'``.
    """

    code: str
    media_types: tuple[MediaTypeDef, ...] = ()

    @property
    def is_default(self) -> bool:
        return self.code == 'default'


class OperationDescriptor(_Descriptor):
    """The structured description of one endpoint.

    Absent groups are treated as "feature not present", never as errors.
    """

    path: str
    verb: Verb
    server: str = ''
    positional_params: tuple[Param, ...] = ()
    query_params: tuple[Param, ...] = ()
    header_params: tuple[Param, ...] = ()
    body_param: Param | None = None
    responses: tuple[ResponseDef, ...] = Field(..., min_length=1)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'OperationDescriptor':
        """Build a descriptor from raw (camelCase or snake_case) data.

        Raises:
            DescriptorError: If the data does not form a valid descriptor.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            field = '.'.join(str(part) for part in error['loc']) or None
            raise DescriptorError(
                f'Invalid operation descriptor: {error["msg"]}', field=field
            ) from e

    @property
    def media_types(self) -> list[str]:
        """Every declared response media type, across all status codes."""
        return [m.media_type for r in self.responses for m in r.media_types]


@dataclasses.dataclass(frozen=True)
class OperationNames:
    """Names derived from a single base name.

    Attributes:
        base: camelCase operation name, also the generated function name.
        params: Name of the request-parameter type.
        result: Name of the result union type.
        prefix: PascalCase form of the base name.
    """

    base: str
    params: str
    result: str
    prefix: str

    def variant(self, phrase: str) -> str:
        """Name of the per-status variant type for a status phrase."""
        return f'{self.prefix}{phrase}Result'


class ResponseParsing(Enum):
    """How a generated function turns the response body into ``data``."""

    ALL_JSON = 'all-json'
    """Every declared media type is JSON: parse as JSON unconditionally."""

    ALL_TEXT = 'all-text'
    """No declared media type is JSON: read the body as text."""

    MIXED = 'mixed'
    """Both kinds are declared: branch on the response content-type."""

    NONE = 'none'
    """No media types at all: no parse step and no ``data`` field."""

    @classmethod
    def classify(cls, media_types: list[str]) -> 'ResponseParsing':
        if not media_types:
            return cls.NONE
        json_flags = [is_json_media_type(m) for m in media_types]
        if all(json_flags):
            return cls.ALL_JSON
        if not any(json_flags):
            return cls.ALL_TEXT
        return cls.MIXED
