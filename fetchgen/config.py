import json
import os
import tomllib
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from fetchgen.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['fetchgen.yaml', 'fetchgen.yml']


class GeneratorConfig(BaseSettings):
    """Settings that shape the generated client text."""

    model_config = SettingsConfigDict(env_prefix='FETCHGEN_', extra='forbid')

    credentials: str | None = Field(
        'same-origin',
        description='Value of the fetch credentials option, or None to omit it.',
    )

    export_functions: bool = Field(
        True, description='Whether generated request functions are exported.'
    )

    indent: int = Field(
        2, ge=1, description='Number of spaces per indentation level.'
    )


def load_yaml(path: str | Path) -> dict:
    return yaml.load(Path(path).read_text(), Loader=yaml.FullLoader)


def load_json(path: str | Path) -> dict:
    return json.loads(Path(path).read_text())


def _load(loader, path: str | Path) -> dict | None:
    try:
        return loader(path)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise ConfigurationError(
            f'Failed to read configuration: {e}', config_path=str(path)
        ) from e


def _validate(data: dict | None, source: str) -> GeneratorConfig:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f'Expected a mapping, got {type(data).__name__}', config_path=source
        )
    try:
        return GeneratorConfig(**data)
    except ValidationError as e:
        error = e.errors()[0]
        field = '.'.join(str(part) for part in error['loc']) or None
        raise ConfigurationError(error['msg'], config_path=source, field=field) from e


def get_config(path: str | None = None) -> GeneratorConfig:
    """Load configuration from a file, falling back to defaults.

    Raises:
        ConfigurationError: If a configuration file is missing, unreadable,
            malformed or holds invalid values.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        loader = load_json if path.endswith('.json') else load_yaml
        return _validate(_load(loader, path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _validate(_load(load_yaml, candidate), str(candidate))

    candidate = Path(cwd) / 'pyproject.toml'

    if candidate.exists():
        try:
            pyproject = tomllib.loads(candidate.read_text())
        except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as e:
            raise ConfigurationError(
                f'Failed to read configuration: {e}', config_path=str(candidate)
            ) from e
        tools = pyproject.get('tool', {})

        if 'fetchgen' in tools:
            return _validate(tools['fetchgen'], str(candidate))

    return GeneratorConfig()
