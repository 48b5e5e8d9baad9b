"""Request-parameter type construction.

Builds the single type a generated function takes as ``params``:

    interface GetUserParams {
      id: string;
      query?: {
        expand?: string;
      };
    }
"""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from fetchgen.codegen.formatting import (
    format_object_type,
    format_type_declaration,
    format_type_field,
)

if TYPE_CHECKING:
    from fetchgen.codegen.types import OperationDescriptor, OperationNames, Param

__all__ = ['ParamsTypeBuilder']

logger = logging.getLogger(__name__)


class ParamsTypeBuilder:
    """Assembles the request-parameter type of an operation.

    Path parameters become top-level fields, the body becomes ``data``, and
    query and header parameters are grouped in nested ``query`` and
    ``headers`` objects. A group with no parameters contributes no field.

    Example:
        >>> builder = ParamsTypeBuilder()
        >>> builder.build(descriptor, names)
        'interface GetUserParams {\\n  id: string;\\n}'
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def build(self, descriptor: 'OperationDescriptor', names: 'OperationNames') -> str:
        fields = [
            *self.path_fields(descriptor.positional_params),
            *self.body_fields(descriptor.body_param),
            *self.group_fields('query', descriptor.query_params),
            *self.group_fields('headers', descriptor.header_params, quote_names=True),
        ]
        impl = format_object_type(fields, self.indent)
        return format_type_declaration(names.params, impl)

    def path_fields(self, params: Sequence['Param']) -> list[str]:
        # Path parameters are always part of the URL, hence always required.
        return [format_type_field(False, p.name, True, p.type) for p in params]

    def body_fields(self, body: 'Param | None') -> list[str]:
        if body is None:
            return []
        return [format_type_field(False, 'data', body.required, body.type)]

    def group_fields(
        self, field: str, params: Sequence['Param'], quote_names: bool = False
    ) -> list[str]:
        """Render a parameter group as one field holding a nested object.

        The field is optional unless at least one of its members is required.
        Header names are quoted since they usually contain hyphens.
        """
        if not params:
            logger.debug(f'No {field} parameters, omitting field')
            return []

        members = [
            format_type_field(
                False, f'"{p.name}"' if quote_names else p.name, p.required, p.type
            )
            for p in params
        ]
        group_required = any(p.required for p in params)
        return [
            format_type_field(
                False, field, group_required, format_object_type(members, self.indent)
            )
        ]
