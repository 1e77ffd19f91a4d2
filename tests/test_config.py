"""
Tests for YAML configuration loading and environment overrides
"""

import pytest

from models.config import Environment
from models.validation import Profile, Severity
from utils.config import (
    apply_env_overrides,
    default_config,
    get_profile,
    load_config,
    load_engine_config,
    load_severity_policy,
)


ENV_VARS = [
    'EINVOICE_ENABLED',
    'EINVOICE_ENVIRONMENT',
    'MYINVOIS_CLIENT_ID',
    'MYINVOIS_CLIENT_SECRET',
    'EINVOICE_SUPPLIER_TIN',
    'EINVOICE_PROFILE',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "einvoice:\n"
        "  enabled: true\n"
        "  environment: PRODUCTION\n"
        "  myinvois_client_id: client-1\n"
        "  myinvois_client_secret: s3cret\n"
        "  supplier_tin: C123456789012\n"
        "validation:\n"
        "  profile: PEPPOL\n"
        "  severity_overrides:\n"
        "    NETWORK:\n"
        "      TOT_004: error\n"
    )
    return path


class TestLoadConfig:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        config = load_config(str(path))

        assert load_engine_config(config).enabled is False
        assert get_profile(config) == Profile.NATIONAL

    def test_loads_settings(self, config_file):
        config = load_config(str(config_file))
        settings = load_engine_config(config)

        assert settings.enabled is True
        assert settings.environment == Environment.PRODUCTION
        assert settings.myinvois_client_id == "client-1"
        assert settings.supplier_tin == "C123456789012"
        assert get_profile(config) == Profile.NETWORK

    def test_secret_is_reduced_to_flag(self, config_file):
        config = load_config(str(config_file))

        assert 'myinvois_client_secret' not in config['einvoice']
        assert load_engine_config(config).has_client_secret is True

    def test_severity_overrides(self, config_file):
        policy = load_severity_policy(load_config(str(config_file)))

        assert policy.severity_for('TOT_004', Profile.NETWORK) == Severity.ERROR
        assert policy.severity_for('TOT_004', Profile.NATIONAL) == Severity.WARNING

    def test_unknown_override_code(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("validation:\n  severity_overrides:\n    NATIONAL:\n      XYZ_999: error\n")

        with pytest.raises(ValueError):
            load_severity_policy(load_config(str(path)))


class TestEnvOverrides:

    def test_environment_wins_over_file(self, config_file, monkeypatch):
        monkeypatch.setenv('EINVOICE_ENABLED', 'false')
        monkeypatch.setenv('EINVOICE_SUPPLIER_TIN', 'C999999999999')
        monkeypatch.setenv('EINVOICE_PROFILE', 'LHDN')
        monkeypatch.setenv('EINVOICE_ENVIRONMENT', 'sandbox')

        config = load_config(str(config_file))
        settings = load_engine_config(config)

        assert settings.enabled is False
        assert settings.supplier_tin == "C999999999999"
        assert settings.environment == Environment.SANDBOX
        assert get_profile(config) == Profile.NATIONAL

    def test_secret_from_environment(self, monkeypatch):
        monkeypatch.setenv('MYINVOIS_CLIENT_SECRET', 'from-env')
        monkeypatch.setenv('MYINVOIS_CLIENT_ID', 'id-from-env')

        settings = load_engine_config(apply_env_overrides(default_config()))

        assert settings.has_client_secret is True
        assert settings.myinvois_client_id == 'id-from-env'

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_truthy_values(self, monkeypatch, value):
        monkeypatch.setenv('EINVOICE_ENABLED', value)

        assert load_engine_config(apply_env_overrides({})).enabled is True

    def test_no_secret_anywhere(self):
        settings = load_engine_config(apply_env_overrides(default_config()))

        assert settings.has_client_secret is False
