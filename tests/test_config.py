"""
Tests for configuration system
"""
import pytest
from config import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    get_config,
    get_missing_env_vars
)


@pytest.mark.unit
class TestBaseConfig:
    """Tests for base configuration"""

    def test_base_config_has_secret_key(self):
        """Test that base config has a secret key"""
        config = Config()
        assert config.SECRET_KEY is not None

    def test_base_config_has_cors_settings(self):
        """Test that base config has CORS settings"""
        config = Config()
        assert 'GET' in config.CORS_METHODS
        assert 'POST' in config.CORS_METHODS

    def test_base_config_has_database_url(self):
        """Test that base config has a database URL"""
        assert Config.DATABASE_URL

    def test_base_config_has_logging_settings(self):
        """Test that base config has logging settings"""
        config = Config()
        assert config.LOG_FILE
        assert config.LOG_TO_FILE is True


@pytest.mark.unit
class TestEnvironmentConfigs:
    """Tests for environment-specific configuration"""

    def test_development_config(self):
        config = DevelopmentConfig()
        assert config.DEBUG is True
        assert config.TESTING is False
        assert config.LOG_LEVEL == 'DEBUG'
        assert '*' in config.CORS_ORIGINS

    def test_production_config_has_secure_cookies(self):
        config = ProductionConfig()
        assert config.DEBUG is False
        assert config.SESSION_COOKIE_SECURE is True
        assert config.SESSION_COOKIE_HTTPONLY is True
        assert config.PREFERRED_URL_SCHEME == 'https'

    def test_testing_config_uses_memory_database(self):
        config = TestingConfig()
        assert config.TESTING is True
        assert config.DATABASE_URL == 'sqlite://'
        assert config.LOG_TO_FILE is False


@pytest.mark.unit
class TestGetConfig:
    """Tests for configuration selector"""

    def test_get_config_returns_development_by_default(self, monkeypatch):
        monkeypatch.delenv('FLASK_ENV', raising=False)
        assert get_config() == DevelopmentConfig

    def test_get_config_returns_production_when_set(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'production')
        assert get_config() == ProductionConfig

    def test_get_config_returns_testing_when_set(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'testing')
        assert get_config() == TestingConfig

    def test_get_config_unknown_env_falls_back(self, monkeypatch):
        monkeypatch.setenv('FLASK_ENV', 'staging')
        assert get_config() == DevelopmentConfig


@pytest.mark.unit
class TestMissingEnvVars:
    """Tests for required environment variable detection"""

    def test_reports_missing(self, monkeypatch):
        monkeypatch.delenv('BIZABODE_EXAMPLE_VAR', raising=False)
        assert get_missing_env_vars(['BIZABODE_EXAMPLE_VAR']) == ['BIZABODE_EXAMPLE_VAR']

    def test_all_present(self, test_env_vars):
        assert get_missing_env_vars(['DATABASE_URL', 'SECRET_KEY']) == []
