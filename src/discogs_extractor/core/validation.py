"""
Configuration validation utilities.
"""

import importlib
from pathlib import PurePath
from typing import List, Tuple, Optional

from .config import DISCOGS_CONFIG, LOGGING_CONFIG
from .exceptions import ConfigurationError
from .settings import Settings


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.

    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
        "pydantic": "pydantic",
    }

    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)

    return len(missing) == 0, missing


def validate_settings(settings: Settings) -> Tuple[List[str], List[str]]:
    """
    Validate user settings.

    Args:
        settings: Settings to check

    Returns:
        Tuple of (errors, warnings). Errors make extraction impossible,
        warnings only limit it (e.g. search needs credentials).
    """
    errors = []
    warnings = []

    folder = settings.artwork_folder.strip()
    if not folder:
        errors.append("artwork_folder must not be empty")
    elif PurePath(folder).is_absolute():
        errors.append("artwork_folder must be relative to the vault")
    elif ".." in PurePath(folder).parts:
        errors.append("artwork_folder must not leave the vault")

    if not settings.metadata_template.strip():
        errors.append("metadata_template must not be empty")

    if not settings.credentials.is_complete:
        warnings.append("api_key and api_secret are not set; search will be rejected by Discogs")

    return errors, warnings


def validate_configuration(settings: Optional[Settings] = None) -> Tuple[bool, List[str]]:
    """
    Validate application configuration.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )

    if DISCOGS_CONFIG["TIMEOUT"] < 1:
        errors.append("Discogs TIMEOUT must be >= 1")

    if not DISCOGS_CONFIG["BASE_URL"].startswith("https://"):
        errors.append("Discogs BASE_URL must use https")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")

    if settings is not None:
        settings_errors, _ = validate_settings(settings)
        errors.extend(settings_errors)

    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise(settings: Optional[Settings] = None):
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration(settings)
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)
