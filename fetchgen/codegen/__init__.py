"""Code generation for fetch-based TypeScript clients.

Turns operation descriptors into a params type, a result union and a
request function per operation.
"""

from fetchgen.codegen.builders import (
    ParamsTypeBuilder,
    RequestFunctionBuilder,
    ResponseTypeBuilder,
)
from fetchgen.codegen.codegen import Codegen
from fetchgen.codegen.formatting import format_type_declaration, format_type_field
from fetchgen.codegen.naming import derive_base_name, derive_names
from fetchgen.codegen.preamble import format_preamble
from fetchgen.codegen.statuses import status_phrase
from fetchgen.codegen.types import (
    MediaTypeDef,
    OperationDescriptor,
    OperationNames,
    Param,
    ResponseDef,
    ResponseParsing,
)

__all__ = [
    'Codegen',
    'ParamsTypeBuilder',
    'ResponseTypeBuilder',
    'RequestFunctionBuilder',
    'derive_base_name',
    'derive_names',
    'format_preamble',
    'format_type_declaration',
    'format_type_field',
    'status_phrase',
    'MediaTypeDef',
    'OperationDescriptor',
    'OperationNames',
    'Param',
    'ResponseDef',
    'ResponseParsing',
]
