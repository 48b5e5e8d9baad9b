"""Builders package for generated TypeScript text.

Each builder turns one part of an operation descriptor into source text:
the params type, the result union and the request function.
"""

from fetchgen.codegen.builders.function_builder import RequestFunctionBuilder
from fetchgen.codegen.builders.params_builder import ParamsTypeBuilder
from fetchgen.codegen.builders.response_builder import (
    ResponseTypeBuilder,
    ResponseVariant,
    resolve_body_type,
)

__all__ = [
    'ParamsTypeBuilder',
    'RequestFunctionBuilder',
    'ResponseTypeBuilder',
    'ResponseVariant',
    'resolve_body_type',
]
