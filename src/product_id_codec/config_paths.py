"""Configuration path handling for the product identifier codec.

This module implements path resolution for the optional codec configuration
file, following the XDG Base Directory Specification for user-specific files.
"""

import os
from pathlib import Path
from typing import Optional

import platformdirs

# Application name used for directory paths
APP_NAME = "product-id-codec"

# Environment variable names
ENV_CODEC_CONFIG = "PRODUCT_ID_CODEC_CONFIG"

# Default filenames
CODEC_CONFIG_FILENAME = "codec.yml"


def get_user_config_dir() -> Path:
    """Get the path to the user's config directory for this application."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def get_user_config_path() -> Path:
    """Get the location of the per-user codec configuration file."""
    return get_user_config_dir() / CODEC_CONFIG_FILENAME


def get_codec_config_path() -> Optional[str]:
    """Get the path to the codec configuration file, respecting XDG specification.

    Returns:
        Path to the configuration file, or None when no file is configured
        and the codec should use its built-in defaults
    """
    # 1. Check environment variable
    env_path = os.environ.get(ENV_CODEC_CONFIG)
    if env_path and Path(env_path).is_file():
        return env_path

    # 2. Check user config directory
    user_path = get_user_config_path()
    if user_path.is_file():
        return str(user_path)

    # 3. Built-in defaults
    return None
