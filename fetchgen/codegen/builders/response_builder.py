"""Result union construction.

Each declared status code becomes one variant type carrying a literal
``status``, the response ``headers`` and, when a body is declared, the
``data`` type. The result type is the union of every variant:

    type GetUserResult =
      | GetUserOKResult
      | GetUserNotFoundResult

    interface GetUserOKResult {
      status: 200;
      headers: Headers;
      data: User;
    }

    ...
"""

import dataclasses
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from fetchgen.codegen.formatting import (
    format_object_type,
    format_type_declaration,
    format_type_field,
)
from fetchgen.codegen.statuses import DEFAULT_PHRASE, StatusPhraseLookup, status_phrase
from fetchgen.codegen.types import is_json_media_type

if TYPE_CHECKING:
    from fetchgen.codegen.types import MediaTypeDef, OperationNames, ResponseDef

__all__ = ['ResponseTypeBuilder', 'ResponseVariant', 'resolve_body_type']

logger = logging.getLogger(__name__)

DEFAULT_STATUS = '500'
UNTYPED = 'any'


def resolve_body_type(media_types: Sequence['MediaTypeDef']) -> str | None:
    """Pick the body type of one response by media-type priority.

    JSON wins, then any text type, then the first declared one. Returns None
    when no media type is declared, meaning the response has no body.
    """
    if not media_types:
        return None

    selected = (
        next((m for m in media_types if is_json_media_type(m.media_type)), None)
        or next((m for m in media_types if 'text' in m.media_type), None)
        or media_types[0]
    )
    return selected.type or UNTYPED


@dataclasses.dataclass(frozen=True)
class ResponseVariant:
    name: str
    status: str
    data_type: str | None = None


class ResponseTypeBuilder:
    """Assembles the discriminated result union of an operation.

    Args:
        lookup: Maps a numeric status code string to an identifier-safe
            phrase. ``'default'`` never reaches it.
        indent: Number of spaces per indentation level.
    """

    def __init__(self, lookup: StatusPhraseLookup = status_phrase, indent: int = 2):
        self.lookup = lookup
        self.indent = indent

    def variant(
        self, response: 'ResponseDef', names: 'OperationNames'
    ) -> ResponseVariant:
        if response.is_default:
            phrase, status = DEFAULT_PHRASE, DEFAULT_STATUS
        else:
            phrase, status = self.lookup(response.code), response.code
        if not status.isdigit():
            logger.debug(f'Non-numeric status code {status!r}, using number')
            status = 'number'

        return ResponseVariant(
            name=names.variant(phrase),
            status=status,
            data_type=resolve_body_type(response.media_types),
        )

    def format_variant(self, variant: ResponseVariant) -> str:
        fields = [
            format_type_field(False, 'status', True, variant.status),
            format_type_field(False, 'headers', True, 'Headers'),
        ]
        if variant.data_type is not None:
            fields.append(format_type_field(False, 'data', True, variant.data_type))
        return format_type_declaration(
            variant.name, format_object_type(fields, self.indent)
        )

    def build(
        self, responses: Sequence['ResponseDef'], names: 'OperationNames'
    ) -> str:
        variants = [self.variant(response, names) for response in responses]
        pad = ' ' * self.indent

        union = '\n'.join(f'{pad}| {v.name}' for v in variants)
        declarations = '\n\n'.join(self.format_variant(v) for v in variants)

        return f'type {names.result} =\n{union}\n\n{declarations}'
