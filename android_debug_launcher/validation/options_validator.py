"""
Launch Options Validation for Android debug launches

Turns the raw attributes of an AndroidLaunchOptions document into an
immutable LaunchOptions value, or raises a single LauncherException
describing the first rule that failed.
"""

import uuid
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..utils.attributes import (
    TargetArchitecture,
    convert_target_architecture,
    is_missing,
    parse_boolean,
    parse_service_id,
    require_attribute,
)
from ..utils.path_checks import is_valid_directory
from .config import ValidationConfig
from .errors import (
    LauncherException,
    invalid_directory_error,
    unsupported_architecture_error,
)


class LaunchMode(Enum):
    """Launch a new activity, or attach to a running process"""
    LAUNCH = "launch"
    ATTACH = "attach"

    @classmethod
    def from_attach_flag(cls, attach: bool) -> 'LaunchMode':
        return cls.ATTACH if attach else cls.LAUNCH

    @property
    def required_attributes(self) -> Tuple[str, ...]:
        """String attributes that must be non-empty in this mode, in check order"""
        if self is LaunchMode.LAUNCH:
            return ValidationConfig.ALWAYS_REQUIRED + ('LaunchActivity',)
        return ValidationConfig.ALWAYS_REQUIRED


# Document attribute name -> RawLaunchAttributes field
ATTRIBUTE_FIELDS = {
    'Package': 'package',
    'Attach': 'attach',
    'LaunchActivity': 'launch_activity',
    'SDKRoot': 'sdk_root',
    'NDKRoot': 'ndk_root',
    'TargetArchitecture': 'target_architecture',
    'IntermediateDirectory': 'intermediate_directory',
    'AdditionalSOLibSearchPath': 'additional_so_lib_search_path',
    'DeviceId': 'device_id',
    'LogcatServiceId': 'logcat_service_id',
}


@dataclass(frozen=True)
class RawLaunchAttributes:
    """Attributes as read from the launch options document, before validation"""
    package: Optional[str] = None
    attach: bool = False
    launch_activity: Optional[str] = None
    sdk_root: Optional[str] = None
    ndk_root: Optional[str] = None
    target_architecture: Optional[str] = None
    intermediate_directory: Optional[str] = None
    additional_so_lib_search_path: Optional[str] = None
    device_id: Optional[str] = None
    logcat_service_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'RawLaunchAttributes':
        """
        Build raw attributes from a loosely-typed mapping

        Keys are document attribute names (e.g. ``Package``). Unknown keys
        are ignored and non-string values are converted with ``str()``.

        Raises:
            LauncherException: INVALID_ATTRIBUTE if Attach is not a boolean
        """
        values = {}
        for attribute_name, field_name in ATTRIBUTE_FIELDS.items():
            if attribute_name not in mapping:
                continue
            value = mapping[attribute_name]
            if attribute_name == 'Attach':
                values[field_name] = parse_boolean(value, attribute_name)
            elif value is not None:
                values[field_name] = value if isinstance(value, str) else str(value)
        return cls(**values)

    def get(self, attribute_name: str):
        """Look up a value by its document attribute name"""
        return getattr(self, ATTRIBUTE_FIELDS[attribute_name])

    @property
    def mode(self) -> LaunchMode:
        return LaunchMode.from_attach_flag(self.attach)


@dataclass(frozen=True)
class LaunchOptions:
    """
    Validated Android launch options

    package: [Required] Package name to spawn
    is_attach: True when attaching to a running process instead of launching
    launch_activity: Activity to spawn. Required for a launch, unused for an attach
    sdk_root: [Optional] Root of the Android SDK
    ndk_root: [Optional] Root of the Android NDK
    target_architecture: [Required] Target architecture of the application
    intermediate_directory: [Required] Directory that files from the device are downloaded to
    additional_so_lib_search_path: [Optional] Extra directories for shared library symbols
    device_id: [Required] ADB device id of the device/emulator to target
    logcat_service_id: [Optional] Id of the logcat service, nil UUID when unset
    """
    package: str
    is_attach: bool
    launch_activity: Optional[str]
    sdk_root: Optional[str]
    ndk_root: Optional[str]
    target_architecture: TargetArchitecture
    intermediate_directory: str
    additional_so_lib_search_path: Optional[str]
    device_id: str
    logcat_service_id: uuid.UUID

    @property
    def mode(self) -> LaunchMode:
        return LaunchMode.from_attach_flag(self.is_attach)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['target_architecture'] = self.target_architecture.value
        data['logcat_service_id'] = str(self.logcat_service_id)
        return data


class LaunchOptionsValidator:
    """
    Validator for Android launch options

    Holds no per-request state; one instance may validate any number of
    requests, concurrently or not.
    """

    def __init__(self, supported_architectures=None):
        if supported_architectures is None:
            supported_architectures = ValidationConfig.SUPPORTED_ARCHITECTURES
        self.supported_architectures = frozenset(supported_architectures)

    def validate(self, raw: RawLaunchAttributes) -> LaunchOptions:
        """
        Validate raw attributes and build LaunchOptions

        Args:
            raw: Attributes read from the launch options document

        Returns:
            Immutable LaunchOptions

        Raises:
            LauncherException: for the first rule that fails
        """
        if raw is None:
            raise TypeError("raw launch attributes must not be None")

        mode = raw.mode

        for attribute_name in mode.required_attributes:
            require_attribute(raw.get(attribute_name), attribute_name)

        launch_activity = raw.launch_activity
        if mode is LaunchMode.ATTACH and is_missing(launch_activity):
            launch_activity = None

        sdk_root = self._optional_directory(raw.sdk_root, 'SDKRoot')
        ndk_root = self._optional_directory(raw.ndk_root, 'NDKRoot')
        intermediate_directory = self._ensure_valid_directory(
            raw.intermediate_directory, 'IntermediateDirectory')

        target_architecture = convert_target_architecture(raw.target_architecture)
        logcat_service_id = parse_service_id(
            raw.logcat_service_id, ValidationConfig.LOGCAT_SERVICE_ID)

        self._check_architecture_supported(target_architecture)

        return LaunchOptions(
            package=raw.package,
            is_attach=raw.attach,
            launch_activity=launch_activity,
            sdk_root=sdk_root,
            ndk_root=ndk_root,
            target_architecture=target_architecture,
            intermediate_directory=intermediate_directory,
            additional_so_lib_search_path=raw.additional_so_lib_search_path,
            device_id=raw.device_id,
            logcat_service_id=logcat_service_id,
        )

    def check(self, raw: RawLaunchAttributes) -> Tuple[Optional[LaunchOptions], Optional[LauncherException]]:
        """Validate without raising; returns (options, None) or (None, error)"""
        try:
            return self.validate(raw), None
        except LauncherException as e:
            return None, e

    def _optional_directory(self, value: Optional[str], attribute_name: str) -> Optional[str]:
        if value is None:
            return None
        return self._ensure_valid_directory(value, attribute_name)

    def _ensure_valid_directory(self, value: str, attribute_name: str) -> str:
        if not is_valid_directory(value):
            raise invalid_directory_error(attribute_name, value)
        return value

    def _check_architecture_supported(self, architecture: TargetArchitecture):
        if architecture not in self.supported_architectures:
            raise unsupported_architecture_error(architecture)

    def validate_many(self, raws: List[RawLaunchAttributes]) -> List[Tuple[Optional[LaunchOptions], Optional[LauncherException]]]:
        return [self.check(raw) for raw in raws]

    def get_validation_summary(self, raws: List[RawLaunchAttributes]) -> Dict:
        """Get a summary of validation results"""

        results = self.validate_many(raws)

        errors_by_kind = {}
        for _, error in results:
            if error is not None:
                errors_by_kind[error.kind.value] = errors_by_kind.get(error.kind.value, 0) + 1

        valid_count = sum(1 for options, _ in results if options is not None)

        return {
            'total': len(raws),
            'valid_count': valid_count,
            'invalid_count': len(raws) - valid_count,
            'errors_by_kind': errors_by_kind,
            'detailed_results': results,
        }


# Convenience functions for integration
_default_validator = LaunchOptionsValidator()


def validate_launch_options(raw: RawLaunchAttributes) -> LaunchOptions:
    """Validate with the default supported architectures, raising on failure"""
    return _default_validator.validate(raw)


def check_launch_options(raw: RawLaunchAttributes) -> Tuple[Optional[LaunchOptions], Optional[LauncherException]]:
    """
    Validate without raising

    Returns:
        Tuple of (options, error); exactly one of them is None
    """
    return _default_validator.check(raw)
