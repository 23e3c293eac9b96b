"""Tests for the YAML configuration loader"""

from pathlib import Path

import pytest

from sairdf.config import config_loader
from sairdf.config.config_loader import SaiRdfConfig, get_config, reload_config
from sairdf.rdf.rdf_exceptions import RdfConfigurationError
from test_sairdf.utils.test_helpers import write_config


@pytest.fixture
def reset_global_config(monkeypatch):
    monkeypatch.setattr(config_loader, '_config_instance', None)
    monkeypatch.delenv('SAIRDF_CONFIG', raising=False)


class TestDefaults:

    def test_default_sections(self):
        config = SaiRdfConfig()
        assert config.config_path is None
        assert config.get_jsonld_config() == {'use_native_types': False, 'indent': None}
        assert config.get_app_config() == {'log_level': 'INFO'}

    def test_default_document_loader(self):
        loader_config = SaiRdfConfig().get_document_loader_config()
        assert loader_config['type'] == 'requests'
        assert loader_config['timeout'] == 10
        assert loader_config['allow_remote'] is False
        assert loader_config['contexts'] == {}

    def test_defaults_validate(self):
        SaiRdfConfig().validate_config()


class TestLoading:

    def test_load_file(self, tmp_path):
        config = write_config(tmp_path, {
            'jsonld': {
                'use_native_types': True,
                'indent': 4,
                'document_loader': {'type': 'none', 'timeout': 2.5}
            },
            'app': {'log_level': 'debug'}
        })

        assert config.config_path == str((tmp_path / "sairdf-config.yaml").absolute())
        assert config.get_jsonld_config() == {'use_native_types': True, 'indent': 4}
        loader_config = config.get_document_loader_config()
        assert loader_config['type'] == 'none'
        assert loader_config['timeout'] == 2.5
        assert loader_config['allow_remote'] is False

    def test_partial_file_uses_defaults(self, tmp_path):
        config = write_config(tmp_path, {'app': {'log_level': 'WARNING'}})
        assert config.get_jsonld_config()['use_native_types'] is False
        assert config.get_document_loader_config()['type'] == 'requests'

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding='utf-8')
        config = SaiRdfConfig(str(path))
        assert config.config_data == {}
        config.validate_config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(RdfConfigurationError):
            SaiRdfConfig(str(tmp_path / "missing.yaml"))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("jsonld: [unclosed\n  indent: : 2", encoding='utf-8')
        with pytest.raises(RdfConfigurationError):
            SaiRdfConfig(str(path))

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- jsonld\n- app\n", encoding='utf-8')
        with pytest.raises(RdfConfigurationError):
            SaiRdfConfig(str(path))

    def test_relative_context_paths(self, tmp_path):
        config = write_config(tmp_path, {
            'jsonld': {
                'document_loader': {
                    'type': 'local',
                    'contexts': {'https://contexts.example/a.jsonld': 'contexts/a.jsonld'}
                }
            }
        })
        contexts = config.get_document_loader_config()['contexts']
        assert Path(contexts['https://contexts.example/a.jsonld']) == tmp_path.absolute() / "contexts" / "a.jsonld"

    def test_absolute_context_paths(self, tmp_path):
        context_path = str(tmp_path.absolute() / "a.jsonld")
        config = write_config(tmp_path, {
            'jsonld': {'document_loader': {'type': 'local', 'contexts': {'https://contexts.example/a.jsonld': context_path}}}
        })
        assert config.get_document_loader_config()['contexts']['https://contexts.example/a.jsonld'] == context_path


class TestValidation:

    @pytest.mark.parametrize("config_data", [
        {'jsonld': {'document_loader': {'type': 'ftp'}}},
        {'jsonld': {'document_loader': {'timeout': 0}}},
        {'jsonld': {'document_loader': {'timeout': 'soon'}}},
        {'jsonld': {'document_loader': {'contexts': ['https://contexts.example/a.jsonld']}}},
        {'jsonld': {'indent': -1}},
        {'jsonld': {'indent': 'wide'}},
        {'jsonld': {'indent': True}},
    ])
    def test_invalid_values(self, config_data):
        config = SaiRdfConfig()
        config.config_data = config_data
        with pytest.raises(RdfConfigurationError):
            config.validate_config()

    def test_invalid_file_fails_validation(self, tmp_path):
        with pytest.raises(RdfConfigurationError):
            write_config(tmp_path, {'jsonld': {'document_loader': {'type': 'ftp'}}})


class TestLogLevel:

    def test_log_level_from_config(self, tmp_path, monkeypatch):
        monkeypatch.delenv('SAIRDF_LOG_LEVEL', raising=False)
        config = write_config(tmp_path, {'app': {'log_level': 'debug'}})
        assert config.get_log_level() == 'DEBUG'

    def test_log_level_environment_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv('SAIRDF_LOG_LEVEL', 'warning')
        config = write_config(tmp_path, {'app': {'log_level': 'debug'}})
        assert config.get_log_level() == 'WARNING'


class TestGlobalConfig:

    def test_get_config_defaults(self, reset_global_config):
        config = get_config()
        assert config.config_path is None
        assert get_config() is config

    def test_get_config_from_environment(self, reset_global_config, tmp_path, monkeypatch):
        write_config(tmp_path, {'jsonld': {'indent': 2}})
        monkeypatch.setenv('SAIRDF_CONFIG', str(tmp_path / "sairdf-config.yaml"))
        assert get_config().get_jsonld_config()['indent'] == 2

    def test_reload_config(self, reset_global_config, tmp_path):
        first = get_config()
        write_config(tmp_path, {'jsonld': {'indent': 2}})
        reloaded = reload_config(str(tmp_path / "sairdf-config.yaml"))
        assert reloaded is not first
        assert get_config() is reloaded
        assert reloaded.get_jsonld_config()['indent'] == 2

    def test_programmatic_config_keeps_context_paths(self):
        config = SaiRdfConfig()
        config.config_data = {
            'jsonld': {'document_loader': {'type': 'local', 'contexts': {'https://contexts.example/a.jsonld': 'a.jsonld'}}}
        }
        assert config.config_path is None
        assert config.get_document_loader_config()['contexts'] == {'https://contexts.example/a.jsonld': 'a.jsonld'}

    def test_str(self):
        assert "SaiRdfConfig" in str(SaiRdfConfig())
