from .xml_options import load_launch_options_file, parse_launch_options_xml

__all__ = [
    "load_launch_options_file",
    "parse_launch_options_xml",
]
