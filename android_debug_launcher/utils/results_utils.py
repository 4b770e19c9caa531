import json
import os
from typing import Dict, List, Optional, Tuple


def build_report(results: List[Tuple[str, object, Optional[Exception]]]) -> Dict:
    """
    Build a JSON-serializable report from per-file validation results

    Args:
        results: (source, options, error) triples; options is a LaunchOptions
            or None, error is a LauncherException or None

    Returns:
        Dictionary with totals and one entry per source
    """
    entries = []
    errors_by_kind = {}

    for source, options, error in results:
        entry = {'source': source, 'valid': error is None}
        if error is None:
            entry['options'] = options.to_dict()
        elif hasattr(error, 'to_dict'):
            entry['error'] = error.to_dict()
            kind = entry['error']['kind']
            errors_by_kind[kind] = errors_by_kind.get(kind, 0) + 1
        else:
            kind = 'document' if isinstance(error, (OSError, ValueError)) else 'unexpected'
            entry['error'] = {'kind': kind, 'message': str(error)}
            errors_by_kind[kind] = errors_by_kind.get(kind, 0) + 1
        entries.append(entry)

    valid_count = sum(1 for entry in entries if entry['valid'])
    return {
        'files_checked': len(entries),
        'valid_count': valid_count,
        'invalid_count': len(entries) - valid_count,
        'errors_by_kind': errors_by_kind,
        'files': entries,
    }


def save_validation_report(report: Dict, output_dir: str, filename: str = 'validation_report.json') -> Optional[str]:
    """Save a validation report to JSON, returning the written path"""
    if not report:
        return None

    try:
        os.makedirs(output_dir, exist_ok=True)
        output_file = os.path.join(output_dir, filename)

        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=4, ensure_ascii=False)

        print(f"\n📄 Validation report saved to {output_file}")
        print(f"Files checked: {report['files_checked']}")
        print(f"Valid: {report['valid_count']}")
        print(f"Invalid: {report['invalid_count']}")
        if report['errors_by_kind']:
            print("Errors by kind:")
            for kind, count in report['errors_by_kind'].items():
                print(f"  {kind}: {count}")
        return output_file

    except OSError as e:
        print(f"⚠️ Error saving validation report: {e}")
        print("Check that the output directory is writable")
        return None
