"""
Shared attribute conversion helpers for launch options

These are the routines every launcher uses to turn raw document
attributes into typed values.
"""

import re
import uuid
from enum import Enum
from typing import Optional

from ..validation.errors import (
    TelemetryCode,
    invalid_attribute_error,
    missing_attribute_error,
)


class TargetArchitecture(Enum):
    """Processor architectures known to the debugger toolchain"""
    X86 = "X86"
    ARM = "ARM"
    X64 = "X64"
    MIPS = "Mips"
    ARM64 = "ARM64"


# Attribute text -> architecture. Matching is exact; only these casings are accepted.
ARCHITECTURE_NAMES = {
    'x86': TargetArchitecture.X86,
    'X86': TargetArchitecture.X86,
    'arm': TargetArchitecture.ARM,
    'ARM': TargetArchitecture.ARM,
    'mips': TargetArchitecture.MIPS,
    'MIPS': TargetArchitecture.MIPS,
    'x64': TargetArchitecture.X64,
    'X64': TargetArchitecture.X64,
    'amd64': TargetArchitecture.X64,
    'AMD64': TargetArchitecture.X64,
    'arm64': TargetArchitecture.ARM64,
    'ARM64': TargetArchitecture.ARM64,
}

# Nil identifier used when no service id is configured
EMPTY_SERVICE_ID = uuid.UUID(int=0)

_HEX = '[0-9a-fA-F]'
_HYPHENATED = f'{_HEX}{{8}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{4}}-{_HEX}{{12}}'
SERVICE_ID_PATTERNS = [
    re.compile(rf'^{_HEX}{{32}}$'),
    re.compile(rf'^{_HYPHENATED}$'),
    re.compile(rf'^\{{{_HYPHENATED}\}}$'),
    re.compile(rf'^\({_HYPHENATED}\)$'),
]


def is_missing(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def require_attribute(value: Optional[str], attribute_name: str) -> str:
    """
    Return the attribute value, or raise if it is missing

    Args:
        value: Raw attribute text (None when absent)
        attribute_name: Name used in the error message

    Returns:
        The value, unchanged

    Raises:
        LauncherException: MISSING_ATTRIBUTE when value is None, empty or blank
    """
    if is_missing(value):
        raise missing_attribute_error(attribute_name)
    return value


def convert_target_architecture(value: Optional[str]) -> TargetArchitecture:
    """
    Map architecture text to TargetArchitecture

    Absent, blank and unlisted names are all unrecognized.
    """
    architecture = ARCHITECTURE_NAMES.get(value) if value else None
    if architecture is None:
        raise invalid_attribute_error(
            'TargetArchitecture', value,
            telemetry_code=TelemetryCode.UNKNOWN_TARGET_ARCHITECTURE,
        )
    return architecture


def parse_service_id(value: Optional[str], attribute_name: str) -> uuid.UUID:
    """
    Parse a service identifier

    Empty or absent values resolve to EMPTY_SERVICE_ID. Accepted forms are
    32 hex digits, the hyphenated 8-4-4-4-12 form, and the hyphenated form
    wrapped in braces or parentheses. The hexadecimal structure form
    ({0x...,0x...,0x...,{0x...}}) is not accepted.
    """
    if not value:
        return EMPTY_SERVICE_ID

    text = value.strip()
    if not any(pattern.match(text) for pattern in SERVICE_ID_PATTERNS):
        raise invalid_attribute_error(attribute_name, value)

    return uuid.UUID(text.strip('{}()'))


def parse_boolean(value, attribute_name: str) -> bool:
    """Coerce xs:boolean text (true/false/1/0) or a bool"""
    if isinstance(value, bool):
        return value
    if value is None:
        return False

    text = str(value).strip().lower()
    if text in ('true', '1'):
        return True
    if text in ('false', '0'):
        return False
    raise invalid_attribute_error(attribute_name, str(value))
