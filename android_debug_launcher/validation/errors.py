"""
Launcher errors raised while validating Android launch options
"""

from enum import Enum
from typing import Optional

from ..utils.resources import LauncherResources


class ValidationErrorKind(Enum):
    """Classification of a failed validation"""
    MISSING_ATTRIBUTE = "missing_attribute"
    INVALID_DIRECTORY = "invalid_directory"
    INVALID_ATTRIBUTE = "invalid_attribute"
    UNSUPPORTED_ARCHITECTURE = "unsupported_architecture"


class TelemetryCode(Enum):
    """Telemetry bucket attached to a failure. Never sent from here."""
    NO_REPORT = "NoReport"
    INVALID_LAUNCH_OPTIONS = "InvalidLaunchOptions"
    UNKNOWN_TARGET_ARCHITECTURE = "UnknownTargetArchitecture"


class LauncherException(Exception):
    """
    A single classified launch option failure

    Carries the failure kind, the telemetry classification, the offending
    attribute name and (when relevant) its value. ``str(exc)`` is the
    user-facing message.
    """

    def __init__(self, kind: ValidationErrorKind, telemetry_code: TelemetryCode,
                 message: str, attribute_name: Optional[str] = None,
                 value: Optional[str] = None):
        super().__init__(message)
        self.kind = kind
        self.telemetry_code = telemetry_code
        self.message = message
        self.attribute_name = attribute_name
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, LauncherException):
            return NotImplemented
        return (self.kind, self.telemetry_code, self.attribute_name, self.value) == \
            (other.kind, other.telemetry_code, other.attribute_name, other.value)

    def __hash__(self):
        return hash((self.kind, self.telemetry_code, self.attribute_name, self.value))

    def __repr__(self):
        return (f"LauncherException(kind={self.kind.value!r}, "
                f"attribute_name={self.attribute_name!r}, value={self.value!r})")

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'telemetry_code': self.telemetry_code.value,
            'attribute': self.attribute_name,
            'value': self.value,
            'message': self.message,
        }


def missing_attribute_error(attribute_name: str) -> LauncherException:
    return LauncherException(
        ValidationErrorKind.MISSING_ATTRIBUTE,
        TelemetryCode.INVALID_LAUNCH_OPTIONS,
        LauncherResources.format('Error_MissingAttribute', attribute_name),
        attribute_name=attribute_name,
    )


def invalid_directory_error(attribute_name: str, value: str) -> LauncherException:
    return LauncherException(
        ValidationErrorKind.INVALID_DIRECTORY,
        TelemetryCode.NO_REPORT,
        LauncherResources.format('Error_InvalidDirectoryAttribute', attribute_name, value),
        attribute_name=attribute_name,
        value=value,
    )


def invalid_attribute_error(attribute_name: str, value: Optional[str] = None,
                            telemetry_code: TelemetryCode = TelemetryCode.NO_REPORT) -> LauncherException:
    return LauncherException(
        ValidationErrorKind.INVALID_ATTRIBUTE,
        telemetry_code,
        LauncherResources.format('Error_InvalidAttribute', attribute_name),
        attribute_name=attribute_name,
        value=value,
    )


def unsupported_architecture_error(architecture) -> LauncherException:
    """Build the error for a recognized but unsupported target architecture"""
    name = getattr(architecture, 'value', str(architecture))
    return LauncherException(
        ValidationErrorKind.UNSUPPORTED_ARCHITECTURE,
        TelemetryCode.NO_REPORT,
        LauncherResources.format('UnsupportedTargetArchitecture', name),
        attribute_name='TargetArchitecture',
        value=name,
    )
