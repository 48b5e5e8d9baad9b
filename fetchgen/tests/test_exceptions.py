"""Test suite for the fetchgen exception hierarchy."""

import pytest

from fetchgen.exceptions import (
    ConfigurationError,
    DescriptorError,
    EndpointGenerationError,
    FetchGenError,
)


class TestFetchGenError:
    """Tests for the base FetchGenError exception."""

    def test_basic_message(self):
        error = FetchGenError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    def test_can_be_caught_as_exception(self):
        with pytest.raises(Exception):
            raise FetchGenError('Test error')


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_message_only(self):
        error = ConfigurationError('Invalid value')

        assert str(error) == 'Invalid value'
        assert error.config_path is None
        assert error.field is None

    def test_with_path_and_field(self):
        error = ConfigurationError(
            'Invalid value', config_path='a.yaml', field='indent'
        )

        assert isinstance(error, FetchGenError)
        assert str(error) == "Invalid value in 'a.yaml' (field: indent)"


class TestDescriptorError:
    """Tests for DescriptorError."""

    def test_with_field(self):
        error = DescriptorError('Invalid operation descriptor', field='verb')

        assert isinstance(error, FetchGenError)
        assert error.field == 'verb'
        assert str(error) == 'Invalid operation descriptor (field: verb)'


class TestEndpointGenerationError:
    """Tests for EndpointGenerationError."""

    def test_name_only(self):
        error = EndpointGenerationError('getUser')

        assert str(error) == "Failed to generate endpoint 'getUser'"
        assert error.cause is None

    def test_with_method_path_and_cause(self):
        cause = KeyError('599')
        error = EndpointGenerationError(
            'getUser', method='get', path='/users/{id}', cause=cause
        )

        assert error.name == 'getUser'
        assert error.cause is cause
        assert 'GET /users/{id}' in str(error)
        assert "'599'" in str(error)
