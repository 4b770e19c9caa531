#!/usr/bin/env python3
import os
import sys
import argparse
from dotenv import find_dotenv, load_dotenv
from tqdm import tqdm

from .parsing.xml_options import load_launch_options_file
from .utils.results_utils import build_report, save_validation_report
from .validation import LauncherException, LaunchOptionsValidator, ValidationConfig


def load_environment():
    """Load .env from the working directory, falling back to parent directories"""
    if load_dotenv(find_dotenv(usecwd=True)):
        return

    current_dir = os.path.dirname(os.path.abspath(__file__))
    for i in range(5):  # Try up to 5 levels up
        parent_dir = os.path.join(current_dir, *(['..'] * (i + 1)))
        env_path = os.path.join(parent_dir, ".env")
        if os.path.exists(env_path):
            load_dotenv(env_path)
            break


def env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')


def setup_argument_parser():
    """Set up and return the argument parser for CLI arguments"""
    parser = argparse.ArgumentParser(description='Android debug launch options validator')
    parser.add_argument('files', nargs='+',
                        help='AndroidLaunchOptions XML files to validate')
    parser.add_argument('--output', type=str, default=None,
                        help='Directory to write a JSON validation report to '
                             '(default: $ADL_REPORT_DIR, no report when unset)')
    parser.add_argument('--debug', action='store_true',
                        help='Print tracebacks for unexpected errors (also $ADL_DEBUG)')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print failures')
    return parser


def print_options(options):
    mode = "attach" if options.is_attach else "launch"
    print(f"   Mode: {mode}")
    print(f"   Package: {options.package}")
    if options.launch_activity:
        print(f"   Activity: {options.launch_activity}")
    print(f"   Device: {options.device_id}")
    print(f"   Architecture: {options.target_architecture.value}")
    print(f"   Intermediate directory: {options.intermediate_directory}")


def validate_file(path, validator):
    """
    Validate a single launch options file

    Returns:
        Tuple of (options, error); error is a LauncherException for invalid
        options or a ValueError/OSError when the file could not be read
    """
    try:
        raw = load_launch_options_file(path)
    except (OSError, ValueError, LauncherException) as e:
        return None, e

    return validator.check(raw)


def is_read_error(error) -> bool:
    return isinstance(error, (OSError, ValueError))


def main(argv=None):
    """Main entry point for the application"""
    load_environment()

    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    debug = args.debug or env_flag('ADL_DEBUG')
    output_dir = args.output or os.getenv('ADL_REPORT_DIR')

    validator = LaunchOptionsValidator()
    results = []

    files = args.files
    iterator = tqdm(files, desc="Validating", unit="file") if len(files) > 1 and not args.quiet else files
    for path in iterator:
        try:
            options, error = validate_file(path, validator)
        except Exception as e:
            print(f"\n🚨 Unexpected error while validating {path}: {e}")
            if debug:
                import traceback
                traceback.print_exc()
            options, error = None, e
        results.append((path, options, error))

    for path, options, error in results:
        if error is None:
            if not args.quiet:
                print(f"✅ VALID    {path}")
                print_options(options)
        elif isinstance(error, LauncherException):
            print(f"❌ INVALID  {path}")
            print(f"   {error.message}")
            if debug:
                print(f"   kind={error.kind.value} telemetry={error.telemetry_code.value}")
        elif is_read_error(error):
            print(f"⚠️ UNREADABLE {path}: {error}")
        else:
            print(f"🚨 FAILED   {path}: {error}")

    if output_dir:
        report = build_report(results)
        save_validation_report(report, output_dir, ValidationConfig.REPORT_FILENAME)

    all_valid = all(error is None for _, _, error in results)
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
