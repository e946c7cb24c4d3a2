"""Tests for configuration file path resolution."""

from pathlib import Path
from unittest.mock import patch

import pytest

from product_id_codec.config_paths import (
    CODEC_CONFIG_FILENAME,
    ENV_CODEC_CONFIG,
    get_codec_config_path,
    get_user_config_dir,
    get_user_config_path,
)


@pytest.fixture
def user_dir(tmp_path: Path):
    """Point the user config directory at a temporary location."""
    target = tmp_path / "user"
    target.mkdir()
    with patch("product_id_codec.config_paths.get_user_config_dir", return_value=target):
        yield target


def test_user_config_dir_uses_platformdirs() -> None:
    """The user config directory comes from platformdirs."""
    with patch("platformdirs.user_config_dir", return_value="/xdg/product-id-codec") as mock_dir:
        assert get_user_config_dir() == Path("/xdg/product-id-codec")
    mock_dir.assert_called_once_with("product-id-codec")


def test_no_file_means_defaults(user_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without env var or user file, no config path is returned."""
    monkeypatch.delenv(ENV_CODEC_CONFIG, raising=False)
    assert get_codec_config_path() is None
    assert get_user_config_path() == user_dir / CODEC_CONFIG_FILENAME


def test_user_file_found(user_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A codec.yml in the user directory is picked up."""
    monkeypatch.delenv(ENV_CODEC_CONFIG, raising=False)
    (user_dir / CODEC_CONFIG_FILENAME).write_text("length: 6\n")
    assert get_codec_config_path() == str(user_dir / CODEC_CONFIG_FILENAME)


def test_env_var_takes_precedence(user_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable wins over the user directory."""
    (user_dir / CODEC_CONFIG_FILENAME).write_text("length: 6\n")
    env_file = tmp_path / "env.yml"
    env_file.write_text("length: 7\n")
    monkeypatch.setenv(ENV_CODEC_CONFIG, str(env_file))
    assert get_codec_config_path() == str(env_file)


def test_env_var_pointing_nowhere_is_ignored(user_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A dangling env var path falls through to the next source."""
    monkeypatch.setenv(ENV_CODEC_CONFIG, str(tmp_path / "missing.yml"))
    assert get_codec_config_path() is None
