"""
Core module for the Discogs Metadata Extractor.
Contains configuration, settings, exceptions, logging setup, and validation.
"""

from .config import *
from .exceptions import *
from .logger import setup_logging, set_level, get_logger
from .settings import Settings, SettingsStore, Credentials
from .validation import validate_configuration, validate_and_raise, validate_settings, check_dependencies

__all__ = [
    'setup_logging',
    'set_level',
    'get_logger',
    'Settings',
    'SettingsStore',
    'Credentials',
    'validate_configuration',
    'validate_and_raise',
    'validate_settings',
    'check_dependencies',
    'ExtractorError',
    'ConfigurationError',
    'InvalidUrlFormat',
    'RemoteLookupFailed',
    'Unauthorized',
    'NetworkError',
    'MalformedResponse',
    'AssetDownloadFailed',
    'AssetDirectoryError',
    'NoActiveDocument',
    'DocumentWriteError',
    'ClipboardError',
]
