"""
Unit tests for transcode_prep.config module.
"""
import pytest
from transcode_prep.config import Settings


class TestSettingsFromEnv:
    """Tests for Settings.from_env"""

    def test_defaults(self, monkeypatch):
        for name in ['TRANSCODE_PREP_FPS', 'TRANSCODE_PREP_LOG_LEVEL', 'TRANSCODE_PREP_HOST', 'TRANSCODE_PREP_PORT']:
            monkeypatch.delenv(name, raising=False)
        assert Settings.from_env() == Settings()

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv('TRANSCODE_PREP_FPS', '29.97')
        monkeypatch.setenv('TRANSCODE_PREP_LOG_LEVEL', 'debug')
        monkeypatch.setenv('TRANSCODE_PREP_HOST', '0.0.0.0')
        monkeypatch.setenv('TRANSCODE_PREP_PORT', '9000')
        s = Settings.from_env()
        assert s.fps == 29.97
        assert s.log_level == 'DEBUG'
        assert s.host == '0.0.0.0'
        assert s.port == 9000

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv('TRANSCODE_PREP_PORT', 'eighty')
        with pytest.raises(ValueError, match="TRANSCODE_PREP_PORT"):
            Settings.from_env()
