"""Tests for photoship.core.config — settings from environment and .env."""

from pathlib import Path

import pytest
from photoship.core.config import Settings, get_settings, load_settings, reset_settings, settings_from_env


class TestSettingsFromEnv:
    def test_defaults(self):
        assert settings_from_env({}) == Settings(sepia_mode='legacy', bw_threshold=128)

    def test_sepia_mode(self):
        assert settings_from_env({'PHOTOSHIP_SEPIA_MODE': 'standard'}).sepia_mode == 'standard'

    def test_sepia_mode_case_insensitive(self):
        assert settings_from_env({'PHOTOSHIP_SEPIA_MODE': ' Standard '}).sepia_mode == 'standard'

    def test_blank_values_use_defaults(self):
        env = {'PHOTOSHIP_SEPIA_MODE': '', 'PHOTOSHIP_BW_THRESHOLD': '  '}
        assert settings_from_env(env) == Settings()

    def test_bad_sepia_mode(self):
        with pytest.raises(ValueError, match='PHOTOSHIP_SEPIA_MODE'):
            settings_from_env({'PHOTOSHIP_SEPIA_MODE': 'vintage'})

    def test_bw_threshold(self):
        assert settings_from_env({'PHOTOSHIP_BW_THRESHOLD': '100'}).bw_threshold == 100

    def test_bw_threshold_not_integer(self):
        with pytest.raises(ValueError, match='not an integer'):
            settings_from_env({'PHOTOSHIP_BW_THRESHOLD': 'high'})

    def test_bw_threshold_out_of_range(self):
        with pytest.raises(ValueError, match='outside'):
            settings_from_env({'PHOTOSHIP_BW_THRESHOLD': '300'})

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('PHOTOSHIP_BW_THRESHOLD', '64')
        assert settings_from_env().bw_threshold == 64


class TestLoadSettings:
    def test_loads_from_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv('PHOTOSHIP_SEPIA_MODE', raising=False)
        dotenv = tmp_path / 'photoship.env'
        dotenv.write_text('PHOTOSHIP_SEPIA_MODE=standard\n')
        settings = load_settings(env_file=dotenv)
        assert settings.sepia_mode == 'standard'

    def test_os_env_wins_over_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PHOTOSHIP_BW_THRESHOLD', '10')
        dotenv = tmp_path / 'photoship.env'
        dotenv.write_text('PHOTOSHIP_BW_THRESHOLD=200\n')
        assert load_settings(env_file=dotenv).bw_threshold == 10


class TestGetSettings:
    def test_loaded_once_per_process(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PHOTOSHIP_BW_THRESHOLD', '50')
        first = get_settings()
        monkeypatch.setenv('PHOTOSHIP_BW_THRESHOLD', '60')
        assert get_settings() is first
        assert get_settings().bw_threshold == 50

    def test_reset_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PHOTOSHIP_BW_THRESHOLD', '50')
        get_settings()
        monkeypatch.setenv('PHOTOSHIP_BW_THRESHOLD', '60')
        reset_settings()
        assert get_settings().bw_threshold == 60

    def test_reads_dotenv_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        (tmp_path / '.env').write_text('PHOTOSHIP_SEPIA_MODE=standard\n')
        monkeypatch.chdir(tmp_path)
        assert get_settings().sepia_mode == 'standard'
