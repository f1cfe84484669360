"""Configuration management for Benefits Calc.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - data_dir: where employee, benefits and payroll records are stored (optional)
   - profile: path to profile.yaml (optional, if not colocated)

2. profile.yaml - Company configuration
   - company_id: the one recognized company
   - package_id: the one recognized benefits package

Config directory resolution:
1. BENEFITS_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/benefits-calc/ (XDG_CONFIG_HOME fallback)

Data directory resolution:
1. settings.json "data_dir" key (if set via CLI)
2. XDG_DATA_HOME/benefits-calc/ or ~/.local/share/benefits-calc/
"""

import json
import os
from pathlib import Path
from typing import Optional, Tuple

import yaml


APP_NAME = "benefits-calc"
SETTINGS_FILENAME = "settings.json"
PROFILE_FILENAME = "profile.yaml"
RECORDS_DIRNAME = "records"

# Recognized ids used when the profile does not set them.
DEFAULT_COMPANY_ID = "7e92a294-8d5d-482b-a148-c6f4b6b3d25c"
DEFAULT_PACKAGE_ID = "1"

PROFILE_KEYS = ("company_id", "package_id")


class ProfileNotFoundError(Exception):
    """Raised when no profile is found."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. BENEFITS_CALC_CONFIG_PATH environment variable
    2. ~/.config/benefits-calc/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("BENEFITS_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def _write_settings(settings: dict) -> Path:
    settings_file = get_settings_path()
    settings_file.parent.mkdir(parents=True, exist_ok=True)

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


# =============================================================================
# Data directory
# =============================================================================


def get_data_path() -> Path:
    """Get the data directory path (created if it doesn't exist).

    Uses settings.json "data_dir" if set, else XDG_DATA_HOME/benefits-calc/.
    """
    custom = load_settings().get("data_dir")
    if custom:
        data_path = Path(custom).expanduser()
    else:
        xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
        data_path = Path(xdg_data_home) / APP_NAME
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


def get_records_dir() -> Path:
    """Get the records directory (<data_dir>/records/), created if missing.

    Holds one JSON file per record key: the company's employee list and
    each employee's benefits election and payroll snapshot.
    """
    records_dir = get_data_path() / RECORDS_DIRNAME
    records_dir.mkdir(parents=True, exist_ok=True)
    return records_dir


def set_data_dir(path: str) -> Path:
    """Point the records at a different data directory.

    Existing records are not moved. The directory is created if needed.

    Returns:
        The resolved data directory

    Raises:
        ValueError: If path exists and is not a directory, or cannot be created
    """
    data_path = Path(path).expanduser().resolve()

    if data_path.exists() and not data_path.is_dir():
        raise ValueError(f"Path exists but is not a directory: {data_path}")
    try:
        data_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ValueError(f"Cannot create directory: {data_path}\n{e}") from e

    settings = load_settings()
    settings["data_dir"] = str(data_path)
    _write_settings(settings)
    return data_path


def clear_data_dir() -> bool:
    """Revert to the default data directory.

    Returns:
        True if a custom data_dir was set
    """
    settings = load_settings()
    if "data_dir" not in settings:
        return False
    del settings["data_dir"]
    _write_settings(settings)
    return True


# =============================================================================
# Profile (recognized company and package)
# =============================================================================


def get_profile_path(require_exists: bool = False) -> Path:
    """Get the path to the profile.yaml file.

    Resolution order:
    1. settings.json "profile" key (if set)
    2. profile.yaml in config directory

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    custom_profile = load_settings().get("profile")
    if custom_profile:
        profile_path = Path(custom_profile)
        if require_exists and not profile_path.exists():
            raise ProfileNotFoundError(
                f"Profile not found at configured path: {profile_path}"
            )
        return profile_path

    profile_path = get_config_dir() / PROFILE_FILENAME
    if require_exists and not profile_path.exists():
        raise ProfileNotFoundError(
            f"No profile found at {profile_path}\n\n"
            f"Create one with: benefits-calc profile set company_id YOUR_COMPANY_ID"
        )

    return profile_path


def load_profile(require_exists: bool = True) -> dict:
    """Load the company profile from profile.yaml.

    Returns:
        Profile dictionary (empty dict if not required and not found)

    Raises:
        ProfileNotFoundError: If require_exists=True and no profile found
    """
    profile_path = get_profile_path(require_exists=require_exists)

    if not profile_path.exists():
        return {}

    with open(profile_path, "r") as f:
        return yaml.safe_load(f) or {}


def set_profile_value(key: str, value: str) -> Path:
    """Set the recognized company_id or package_id.

    Ids are opaque strings and are stored quoted, so '2' stays '2'.
    Existing records are not migrated.

    Returns:
        Path to the saved profile file

    Raises:
        ValueError: If key is not a profile key, or value is empty
    """
    if key not in PROFILE_KEYS:
        raise ValueError(
            f"Unknown profile key '{key}'. Valid keys: {', '.join(PROFILE_KEYS)}"
        )
    value = str(value)
    if not value:
        raise ValueError(f"{key} cannot be empty")

    profile = load_profile(require_exists=False)
    profile[key] = value

    path = get_profile_path(require_exists=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(profile, f, default_flow_style=False, sort_keys=False)
    return path


def get_recognized_ids() -> Tuple[str, str]:
    """Get the (company_id, package_id) the engine recognizes.

    Values come from profile.yaml, falling back to the built-in defaults.
    YAML scalars such as `package_id: 2` are read back as strings.
    """
    profile = load_profile(require_exists=False)
    company_id = _profile_id(profile.get("company_id"), DEFAULT_COMPANY_ID)
    package_id = _profile_id(profile.get("package_id"), DEFAULT_PACKAGE_ID)
    return company_id, package_id


def _profile_id(value: Optional[object], default: str) -> str:
    if value is None or value == "":
        return default
    return str(value)
