"""Custom exceptions for fetchgen.

This module defines the exceptions raised around the code generator. The
builders themselves never raise: they degrade gracefully on partial input.
Errors only surface at the boundaries (configuration loading, descriptor
validation) or when an operation fails for an unexpected reason.
"""


class FetchGenError(Exception):
    """Base exception for all fetchgen errors.

    Example:
        try:
            codegen.generate(descriptor)
        except FetchGenError as e:
            print(f"fetchgen error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConfigurationError(FetchGenError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class DescriptorError(FetchGenError):
    """An operation descriptor could not be built from raw data.

    Attributes:
        field: Dotted location of the first invalid field, if known.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        full_message = message
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class EndpointGenerationError(FetchGenError):
    """Error generating the client code for one operation.

    Attributes:
        name: The derived operation name, or the path when no name was derived.
        method: The HTTP method of the endpoint.
        path: The URL path of the endpoint.
        cause: The underlying exception that caused the failure.
    """

    def __init__(
        self,
        name: str,
        method: str | None = None,
        path: str | None = None,
        cause: Exception | None = None,
    ):
        self.name = name
        self.method = method
        self.path = path
        self.cause = cause
        message = f"Failed to generate endpoint '{name}'"
        if method and path:
            message += f' ({method.upper()} {path})'
        if cause:
            message += f': {cause}'
        super().__init__(message)
