"""fetchgen - Generate typed fetch clients from REST operation descriptors.

fetchgen takes an already-parsed description of REST operations and emits
TypeScript source: a params type, a discriminated result union keyed by
status code, and an async ``fetch`` function per operation.

Quick Start:
    >>> from fetchgen import Codegen, OperationDescriptor
    >>>
    >>> descriptor = OperationDescriptor.from_dict({
    ...     'path': '/users',
    ...     'verb': 'post',
    ...     'server': 'https://api.example.com',
    ...     'bodyParam': {'name': 'body', 'type': 'NewUser', 'required': True,
    ...                   'mediaType': 'application/json'},
    ...     'responses': [{'code': '201', 'mediaTypes': [
    ...         {'mediaType': 'application/json', 'type': 'User'}
    ...     ]}],
    ... })
    >>> source = Codegen().generate_many([descriptor])
"""

from fetchgen.codegen.codegen import Codegen
from fetchgen.codegen.types import (
    MediaTypeDef,
    OperationDescriptor,
    Param,
    ResponseDef,
)
from fetchgen.config import GeneratorConfig, get_config
from fetchgen.exceptions import (
    ConfigurationError,
    DescriptorError,
    EndpointGenerationError,
    FetchGenError,
)

__all__ = [
    # Main classes
    'Codegen',
    'OperationDescriptor',
    'Param',
    'MediaTypeDef',
    'ResponseDef',
    # Configuration
    'GeneratorConfig',
    'get_config',
    # Exceptions
    'FetchGenError',
    'ConfigurationError',
    'DescriptorError',
    'EndpointGenerationError',
]

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('fetchgen')
except PackageNotFoundError:
    __version__ = 'unknown'
