"""
E-Invoice Compliance Validator
Validates canonical e-invoice documents before submission

Usage:
    python main.py <document.json>                   # Validate single document
    python main.py <document.json> --json            # Print JSON report
    python main.py --batch <directory>               # Validate every *.json in a directory
    python main.py --batch <directory> --csv out.csv # Also export the issue table
    python main.py ... --profile NETWORK             # Validate for PEPPOL
    python main.py ... --config other.yaml           # Use another config file
"""

import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from engine.orchestrator import ValidationOrchestrator
from engine.reporter import ValidationReporter
from models.validation import Profile
from utils.config import (
    default_config,
    get_profile,
    load_config,
    load_engine_config,
    load_severity_policy,
)
from utils.data_loaders import DocumentLoader


logger = logging.getLogger(__name__)


class UsageError(Exception):
    """Malformed command line"""


class EInvoiceValidatorApp:
    """Command line application around the validation engine"""

    def __init__(self, config_path: str = "config.yaml", profile: Optional[str] = None):
        self.config = self._load_config(config_path)

        self.engine_config = load_engine_config(self.config)
        self.profile = Profile(profile) if profile else get_profile(self.config)
        self.orchestrator = ValidationOrchestrator(load_severity_policy(self.config))
        self.reporter = ValidationReporter(color=sys.stdout.isatty())

    def _load_config(self, config_path: str) -> dict:
        try:
            return load_config(config_path)
        except FileNotFoundError:
            logger.warning("Config file %s not found, using defaults", config_path)
            return default_config()

    def validate_single(self, path: str, as_json: bool = False) -> bool:
        """Validate one document file; returns True when it is valid"""

        document = DocumentLoader().load_file(path)
        result = self.orchestrator.validate(document, self.engine_config, self.profile)

        if as_json:
            print(self.reporter.generate_json_report(document, result, self.profile))
        else:
            print(self.reporter.generate_console_report(document, result, self.profile))

        return result.is_valid

    def validate_batch(self, directory: str, csv_path: Optional[str] = None) -> bool:
        """Validate every document in a directory; returns True when all are valid"""

        loader = DocumentLoader(directory)
        files = loader.document_files()
        print(f"\nProcessing {len(files)} documents from {directory} ({self.profile.value})")

        results = {}
        failed_to_load = []
        for path in files:
            try:
                document = loader.load_file(path)
            except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
                logger.error("Could not load %s: %s", path.name, e)
                failed_to_load.append(path.name)
                continue

            results[path.name] = self.orchestrator.validate(document, self.engine_config, self.profile)

        print("\n" + self.reporter.generate_summary_report(results))

        for name, result in results.items():
            symbol = '✓' if result.is_valid else '✗'
            print(f"{symbol} {name:40s} | E:{result.summary.total_errors:3d} W:{result.summary.total_warnings:3d}")
        for name in failed_to_load:
            print(f"! {name:40s} | could not be loaded")

        if csv_path:
            frame = self.reporter.issues_frame(results)
            frame.to_csv(csv_path, index=False)
            print(f"\nIssue table saved: {csv_path}")

        return not failed_to_load and all(result.is_valid for result in results.values())


def _pop_option(args: List[str], name: str) -> Optional[str]:
    """Remove `name value` from args and return value"""
    if name not in args:
        return None
    index = args.index(name)
    if index + 1 >= len(args):
        raise UsageError(f"{name} requires a value")
    value = args[index + 1]
    del args[index:index + 2]
    return value


def _pop_flag(args: List[str], name: str) -> bool:
    if name in args:
        args.remove(name)
        return True
    return False


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""

    args = list(sys.argv[1:] if argv is None else argv)

    if not args or '--help' in args:
        print(__doc__)
        return 0

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config_path = _pop_option(args, '--config') or "config.yaml"
        profile = _pop_option(args, '--profile')
        csv_path = _pop_option(args, '--csv')
        batch_dir = _pop_option(args, '--batch')
    except UsageError as e:
        logger.error("%s", e)
        print(__doc__)
        return 2
    as_json = _pop_flag(args, '--json')

    try:
        app = EInvoiceValidatorApp(config_path, profile)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        if batch_dir:
            ok = app.validate_batch(batch_dir, csv_path)
        elif args:
            ok = app.validate_single(args[0], as_json)
        else:
            print(__doc__)
            return 2
    except (FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.error("%s", e)
        return 2

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
