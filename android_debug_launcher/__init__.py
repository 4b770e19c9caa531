"""
android_debug_launcher - validation of Android debug launch options.

Reads the attributes of an AndroidLaunchOptions document and turns them into
an immutable, validated LaunchOptions value for the debugger launcher, or a
single classified error explaining what is wrong with the configuration.
"""

# Version information
__version__ = "0.1.0"

from .validation import (
    LauncherException,
    LaunchMode,
    LaunchOptions,
    LaunchOptionsValidator,
    RawLaunchAttributes,
    TelemetryCode,
    ValidationErrorKind,
    check_launch_options,
    validate_launch_options,
)
from .utils.attributes import EMPTY_SERVICE_ID, TargetArchitecture
from .parsing import load_launch_options_file, parse_launch_options_xml

# Define exports
__all__ = [
    "LauncherException",
    "LaunchMode",
    "LaunchOptions",
    "LaunchOptionsValidator",
    "RawLaunchAttributes",
    "TargetArchitecture",
    "TelemetryCode",
    "ValidationErrorKind",
    "EMPTY_SERVICE_ID",
    "check_launch_options",
    "validate_launch_options",
    "load_launch_options_file",
    "parse_launch_options_xml",
    "run_validator",
    "__version__",
]


def run_validator():
    """Run the validator from the command line."""
    import sys
    from .main import main
    sys.exit(main())
