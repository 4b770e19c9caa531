"""
User-facing message templates for launch option errors
"""


class LauncherResources:
    """Message table used when formatting launcher errors"""

    Error_MissingAttribute = "Required attribute '{0}' is missing or empty in the launch options."
    Error_InvalidAttribute = "The value of attribute '{0}' in the launch options is invalid."
    Error_InvalidDirectoryAttribute = (
        "The '{0}' attribute must be an absolute path to an existing directory. "
        "Value: '{1}'"
    )
    UnsupportedTargetArchitecture = (
        "Target architecture '{0}' is not supported when debugging Android applications."
    )

    @classmethod
    def format(cls, name: str, *args) -> str:
        """Format the named message with positional arguments"""
        template = getattr(cls, name)
        return template.format(*args)
