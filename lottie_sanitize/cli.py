"""Console entry point for lottie-sanitize."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

import yaml
from loguru import logger
from pydantic import ValidationError

from .config import AppConfig, load_config
from .io import ParseError, dump_json, read_json, write_json
from .normalize import count_null_targets, get_policy, normalize
from .report import SizeReport, format_kb, write_report


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level)


def _load_config(path: Path) -> AppConfig:
    if not path.exists():
        logger.debug("Using default configuration; no {} found", path)
    return load_config(path)


def _describe_config_error(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        first = exc.errors()[0]
        loc = ".".join(str(part) for part in first["loc"])
        extra = len(exc.errors()) - 1
        more = f" (+{extra} more)" if extra else ""
        return f"{loc}: {first['msg']}{more}"
    return " ".join(str(exc).split())


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    data = config.model_dump()
    if args.input is not None:
        data["paths"]["input"] = args.input
    if args.output is not None:
        data["paths"]["output"] = args.output
    if args.keys is not None:
        data["sanitize"]["target_keys"] = [k.strip() for k in args.keys.split(",") if k.strip()]
    if args.policy is not None:
        data["sanitize"]["policy"] = args.policy
    if args.indent is not None:
        data["output"]["indent"] = args.indent
    if args.report is not None:
        data["output"]["report"] = args.report
    return AppConfig.model_validate(data)


def cmd_fix(config: AppConfig) -> SizeReport:
    src = config.paths.input
    dest = config.paths.output
    keys = config.sanitize.target_keys

    logger.info("Reading file: {}", src)
    doc = read_json(src)

    logger.info("Fixing null values of {}...", ", ".join(keys))
    found = count_null_targets(doc.data, keys)
    fixed = normalize(doc.data, keys, get_policy(config.sanitize.policy))
    text = dump_json(fixed, indent=config.output.indent)

    logger.info("Writing fixed file: {}", dest)
    write_json(dest, text)

    report = SizeReport(
        input_path=src,
        output_path=dest,
        original_bytes=doc.size,
        fixed_bytes=len(text.encode("utf-8")),
        fields_fixed=found,
    )
    logger.info("Done. Fixed {} field(s)", report.fields_fixed)
    logger.info("Original size: {}", format_kb(report.original_bytes))
    logger.info("Fixed size: {}", format_kb(report.fixed_bytes))
    logger.info("Saved: {}", format_kb(report.saved_bytes))
    if config.output.report is not None:
        write_report(config.output.report, report)
        logger.info("Report written to {}", config.output.report)
    return report


def cmd_check(config: AppConfig) -> int:
    doc = read_json(config.paths.input)
    found = count_null_targets(doc.data, config.sanitize.target_keys)
    if found:
        logger.warning("{}: {} null field(s) to fix", doc.path, found)
        return 1
    logger.info("{}: clean", doc.path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lottie-sanitize",
        description="Remove null keyframe tangents (to/ti) from Lottie JSON files",
    )
    parser.add_argument("input", nargs="?", help="Input Lottie JSON file")
    parser.add_argument("output", nargs="?", help="Output path for the fixed file")
    parser.add_argument("--config", default="lottie-sanitize.yaml", help="Path to YAML configuration file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--keys", help="Comma separated keys to strip when null (default: to,ti)")
    parser.add_argument("--policy", choices=["drop", "zero"], help="Drop null keys or replace them with [0,0,0]")
    parser.add_argument("--indent", type=int, help="Pretty-print output with this indent")
    parser.add_argument("--report", help="Write a JSON size report to this path")
    parser.add_argument("--check", action="store_true", help="Only report null fields; exit 1 if any are found")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        config = _apply_overrides(_load_config(Path(args.config)), args)
        if args.check:
            return cmd_check(config)
        cmd_fix(config)
    except ParseError as exc:
        logger.error("{}", exc)
        return 1
    except OSError as exc:
        logger.error("I/O error: {}", exc)
        return 1
    except (ValidationError, yaml.YAMLError) as exc:
        logger.error("Invalid configuration: {}", _describe_config_error(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
