"""Tests for exception classes."""

from pathjoin.exceptions import ConfigError, PathjoinError


class TestConfigError:
    """Tests for ConfigError."""

    def test_is_subclass_of_pathjoin_error(self):
        """ConfigError is a PathjoinError subclass."""
        assert issubclass(ConfigError, PathjoinError)

    def test_message_includes_path_and_reason(self):
        """ConfigError formats message with file and reason."""
        err = ConfigError("/etc/pathjoin.yaml", "top level must be a mapping")
        assert err.path == "/etc/pathjoin.yaml"
        assert err.reason == "top level must be a mapping"
        assert "/etc/pathjoin.yaml" in str(err)
        assert "mapping" in str(err)
