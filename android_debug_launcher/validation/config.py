"""
Validation Configuration
Centralized configuration for launch option validation
"""

from ..utils.attributes import TargetArchitecture


class ValidationConfig:
    """Centralized validation configuration"""

    # Architectures this launcher can debug. Deliberately narrower than the
    # architecture name table.
    SUPPORTED_ARCHITECTURES = frozenset({
        TargetArchitecture.X86,
        TargetArchitecture.ARM,
    })

    # Attributes that must be present regardless of launch mode, in check order
    ALWAYS_REQUIRED = ('Package', 'DeviceId', 'IntermediateDirectory')

    # Service id attribute name
    LOGCAT_SERVICE_ID = 'LogcatServiceId'

    # Element holding the attributes inside a launch options document
    DOCUMENT_ELEMENT = 'AndroidLaunchOptions'

    # Report settings
    REPORT_FILENAME = 'validation_report.json'

