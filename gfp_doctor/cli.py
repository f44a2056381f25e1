"""Command-line entry point for gfp-doctor."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List

from . import __version__
from .config import REPORT_FORMATS, ConfigError, DoctorConfig, load_config
from .logging import configure_logging, get_logger
from .result import Report, format_report
from .rules import ExamineOptions, RuleSet
from .rules.package_json import PACKAGE_JSON_RULES
from .runner import examine_manifest
from .utils import ManifestParseError

EXIT_MISSING_MANIFEST = 1
EXIT_ERROR = 2

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gfp-doctor",
        description="Check package.json against gfp best practices",
    )
    parser.add_argument(
        "--package-path",
        default=None,
        help="Path to package.json, relative to the current directory.",
    )
    parser.add_argument(
        "--format",
        choices=list(REPORT_FORMATS),
        default=None,
        help="Report format (defaults to text).",
    )
    parser.add_argument(
        "--out",
        "--output",
        dest="output_path",
        type=str,
        default=None,
        help="Path to write the JSON report (e.g., artifacts/doctor.json).",
    )
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        default=None,
        help="Exit non-zero when package.json cannot be found.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_rule_set() -> RuleSet:
    return PACKAGE_JSON_RULES


def run_examine(options: ExamineOptions) -> Report:
    return examine_manifest(load_rule_set(), options)


def write_output(report: Report, output_path: str | None, report_format: str) -> None:
    print(format_report(report))

    payload = json.dumps(report.to_dict(), indent=2)
    if output_path:
        output_file = Path(output_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload, encoding="utf-8")
        print(f"\nReport written to {output_path}")
    elif report_format == "json":
        print("\nJSON Report")
        print(payload)


def _merge(args: argparse.Namespace, config: DoctorConfig) -> DoctorConfig:
    return DoctorConfig(
        package_path=args.package_path or config.package_path,
        format=args.format or config.format,
        output=args.output_path or config.output,
        fail_on_missing=config.fail_on_missing if args.fail_on_missing is None else args.fail_on_missing,
    )


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    root = Path.cwd()
    try:
        settings = _merge(args, load_config(root))
    except ConfigError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    options = ExamineOptions(package_path=settings.package_path, root=root)
    try:
        report = run_examine(options)
    except ManifestParseError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    write_output(report, settings.output, settings.format)
    if report.skipped and settings.fail_on_missing:
        return EXIT_MISSING_MANIFEST
    return report.exit_code()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
