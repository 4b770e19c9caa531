"""
Reading AndroidLaunchOptions documents

The element may be the document root or nested inside another element,
and may carry the debugger options namespace or none at all.
"""

from bs4 import BeautifulSoup

from ..validation.config import ValidationConfig
from ..validation.options_validator import RawLaunchAttributes


def parse_launch_options_xml(text: str) -> RawLaunchAttributes:
    """
    Parse launch options XML into raw attributes

    Args:
        text: Document text

    Returns:
        RawLaunchAttributes with the attributes found on the element

    Raises:
        ValueError: if the document has no AndroidLaunchOptions element
        LauncherException: if Attach is not a valid boolean
    """
    soup = BeautifulSoup(text, 'xml')
    element = soup.find(ValidationConfig.DOCUMENT_ELEMENT)
    if element is None:
        raise ValueError(f"No {ValidationConfig.DOCUMENT_ELEMENT} element found in document")

    attributes = {}
    for name, value in element.attrs.items():
        # Drop any namespace prefix, e.g. "opt:Package"
        local_name = name.split(':')[-1]
        if name.startswith('xmlns'):
            continue
        attributes[local_name] = value

    return RawLaunchAttributes.from_mapping(attributes)


def load_launch_options_file(path: str) -> RawLaunchAttributes:
    """Read and parse a launch options XML file"""
    with open(path, 'r', encoding='utf-8-sig') as f:
        return parse_launch_options_xml(f.read())
