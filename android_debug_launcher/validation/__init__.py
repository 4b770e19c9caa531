"""
Launch Options Validation System
Validation of Android debug launch options
"""

from .errors import (
    LauncherException,
    TelemetryCode,
    ValidationErrorKind,
)
from .options_validator import (
    LaunchMode,
    LaunchOptions,
    LaunchOptionsValidator,
    RawLaunchAttributes,
    check_launch_options,
    validate_launch_options,
)
from .config import ValidationConfig

__all__ = [
    'LauncherException',
    'TelemetryCode',
    'ValidationErrorKind',
    'LaunchMode',
    'LaunchOptions',
    'LaunchOptionsValidator',
    'RawLaunchAttributes',
    'ValidationConfig',
    'check_launch_options',
    'validate_launch_options',
]
