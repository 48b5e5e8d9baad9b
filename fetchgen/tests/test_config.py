"""Test configuration for fetchgen package."""

import json
from unittest.mock import patch

import pytest

from fetchgen.config import GeneratorConfig, get_config
from fetchgen.exceptions import ConfigurationError


class TestGeneratorConfig:
    """Test GeneratorConfig model."""

    def test_defaults(self):
        config = GeneratorConfig()

        assert config.credentials == 'same-origin'
        assert config.export_functions is True
        assert config.indent == 2

    def test_environment_override(self, monkeypatch):
        """Settings are read from FETCHGEN_* environment variables."""
        monkeypatch.setenv('FETCHGEN_CREDENTIALS', 'include')
        monkeypatch.setenv('FETCHGEN_INDENT', '4')

        config = GeneratorConfig()

        assert config.credentials == 'include'
        assert config.indent == 4

    def test_invalid_indent(self):
        with pytest.raises(ValueError):
            GeneratorConfig(indent=0)

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            GeneratorConfig(unknown=True)


class TestGetConfig:
    """Test get_config function."""

    def test_get_config_with_yaml_file(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text('credentials: include\nexport_functions: false\n')

        config = get_config(str(path))

        assert config.credentials == 'include'
        assert config.export_functions is False

    def test_get_config_with_json_file(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({'credentials': None, 'indent': 4}))

        config = get_config(str(path))

        assert config.credentials is None
        assert config.indent == 4

    def test_get_config_empty_yaml_file(self, tmp_path):
        path = tmp_path / 'settings.yaml'
        path.write_text('')

        assert get_config(str(path)) == GeneratorConfig()

    def test_get_config_invalid_value(self, tmp_path):
        """Invalid values are reported with the file and field."""
        path = tmp_path / 'settings.yaml'
        path.write_text('indent: 0\n')

        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))

        assert exc_info.value.config_path == str(path)
        assert exc_info.value.field == 'indent'
        assert str(path) in str(exc_info.value)

    def test_get_config_invalid_path(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_config('/nonexistent/path/config.yaml')

        assert exc_info.value.config_path == '/nonexistent/path/config.yaml'

    @pytest.mark.parametrize(
        'filename,content',
        [
            ('settings.yaml', 'indent: [\n'),
            ('settings.json', '{not json'),
            ('settings.yaml', '- a\n- b\n'),
            ('settings.yaml', 'just a string\n'),
            ('settings.json', '[1, 2]'),
        ],
    )
    def test_get_config_malformed_file(self, tmp_path, filename, content):
        """Unparseable files and non-mapping documents name the file."""
        path = tmp_path / filename
        path.write_text(content)

        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))

        assert exc_info.value.config_path == str(path)
        assert str(path) in str(exc_info.value)

    def test_get_config_malformed_pyproject(self, tmp_path, monkeypatch):
        candidate = tmp_path / 'pyproject.toml'
        candidate.write_text('[tool.fetchgen\ncredentials = \n')
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError) as exc_info:
            get_config()

        assert exc_info.value.config_path == str(candidate)

    def test_get_config_default_yaml(self, tmp_path, monkeypatch):
        """fetchgen.yaml in the working directory is picked up."""
        (tmp_path / 'fetchgen.yaml').write_text('indent: 3\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().indent == 3

    def test_get_config_default_yml(self, tmp_path, monkeypatch):
        (tmp_path / 'fetchgen.yml').write_text('credentials: omit\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().credentials == 'omit'

    def test_get_config_from_pyproject_toml(self, tmp_path, monkeypatch):
        (tmp_path / 'pyproject.toml').write_text(
            '[tool.fetchgen]\ncredentials = "include"\n'
        )
        monkeypatch.chdir(tmp_path)

        assert get_config().credentials == 'include'

    def test_pyproject_without_section(self, tmp_path, monkeypatch):
        (tmp_path / 'pyproject.toml').write_text('[tool.other]\nkey = 1\n')
        monkeypatch.chdir(tmp_path)

        assert get_config() == GeneratorConfig()

    @patch('os.getcwd')
    @patch('pathlib.Path.exists')
    def test_get_config_no_file_uses_defaults(self, mock_exists, mock_getcwd):
        mock_getcwd.return_value = '/test/dir'
        mock_exists.return_value = False

        config = get_config()

        assert config == GeneratorConfig()
        mock_exists.assert_called()
