"""Code generation module for fetchgen.

This module provides the main Codegen class that turns operation
descriptors into TypeScript client code.
"""

import logging
from collections.abc import Iterable

from fetchgen.codegen.builders import (
    ParamsTypeBuilder,
    RequestFunctionBuilder,
    ResponseTypeBuilder,
)
from fetchgen.codegen.naming import derive_names
from fetchgen.codegen.preamble import format_preamble
from fetchgen.codegen.statuses import StatusPhraseLookup, status_phrase
from fetchgen.codegen.types import OperationDescriptor
from fetchgen.config import GeneratorConfig
from fetchgen.exceptions import EndpointGenerationError, FetchGenError

__all__ = ['Codegen']

logger = logging.getLogger(__name__)


class Codegen:
    """Main code generator for fetch-based TypeScript clients.

    For every operation it emits, in order and separated by blank lines:
    - the request-parameter type
    - the result union with one variant per status code
    - the async request function

    A whole run is preceded once by the shared preamble.

    Attributes:
        config: The GeneratorConfig shaping the emitted text.
        status_lookup: Maps numeric status codes to variant name phrases.

    Example:
        >>> from fetchgen import Codegen, OperationDescriptor
        >>>
        >>> descriptor = OperationDescriptor.from_dict({
        ...     'path': '/users/{id}',
        ...     'verb': 'get',
        ...     'server': 'https://api.example.com',
        ...     'positionalParams': [{'name': 'id', 'type': 'string'}],
        ...     'responses': [{'code': '200', 'mediaTypes': [
        ...         {'mediaType': 'application/json', 'type': 'User'}
        ...     ]}],
        ... })
        >>> print(Codegen().generate_many([descriptor]))
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        status_lookup: StatusPhraseLookup = status_phrase,
    ):
        self.config = config or GeneratorConfig()
        self.status_lookup = status_lookup

        indent = self.config.indent
        self.params_builder = ParamsTypeBuilder(indent=indent)
        self.response_builder = ResponseTypeBuilder(status_lookup, indent=indent)
        self.function_builder = RequestFunctionBuilder(
            credentials=self.config.credentials,
            export=self.config.export_functions,
            indent=indent,
        )

    def preamble(self) -> str:
        return format_preamble(self.config.indent)

    def generate(self, descriptor: OperationDescriptor) -> str:
        """Generate the block of code for a single operation.

        Raises:
            EndpointGenerationError: If an unexpected error occurs while
                generating the operation.
        """
        names = None
        try:
            names = derive_names(descriptor.path, descriptor.verb)
            params_type = self.params_builder.build(descriptor, names)
            result_type = self.response_builder.build(descriptor.responses, names)
            function = self.function_builder.build(descriptor, names)
        except FetchGenError:
            raise
        except Exception as e:
            raise EndpointGenerationError(
                names.base if names else descriptor.path,
                method=descriptor.verb,
                path=descriptor.path,
                cause=e,
            ) from e

        return f'{params_type}\n\n{result_type}\n\n{function}'

    def generate_many(self, descriptors: Iterable[OperationDescriptor]) -> str:
        """Generate the preamble followed by every operation, in input order."""
        blocks = [self.preamble()]
        for descriptor in descriptors:
            blocks.append(self.generate(descriptor))
        logger.info(f'Generated {len(blocks) - 1} operations')
        return '\n\n'.join(blocks) + '\n'
