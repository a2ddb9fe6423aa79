from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from i18n_excel.config.loader import CONFIG_ENV_VAR, ConfigError, ConverterConfig, load_config
from i18n_excel.errors import ConversionError
from i18n_excel.excel.reader import SheetNotFoundError
from i18n_excel.logging.init import enable_debug, log_summary, setup_logging
from i18n_excel.logging.skip_log import SkipLogBuffer
from i18n_excel.services.conversion import generate_report, parse_report
from i18n_excel.services.summary import (
    render_generate_summary,
    render_parse_summary,
    render_validate_summary,
)
from i18n_excel.services.validation import validate_json_file

"""CLI entrypoint.

    i18n-excel [--config PATH] [--debug] parse    [--input XLSX] [--output JSON | --no-output] [--skip-log DIR]
    i18n-excel [--config PATH] [--debug] generate [--input JSON] [--output XLSX]
    i18n-excel [--config PATH] [--debug] validate [--input JSON]

Without a command, ``parse`` runs with the configured paths.
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_VALIDATION_FAILED = 2


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env so I18N_EXCEL_CONFIG can be set per project."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="i18n-excel", description="i18n spreadsheet <-> JSON converter")
    p.add_argument("--config", type=Path, help=f"YAML config path (env: {CONFIG_ENV_VAR})")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command")

    sp = sub.add_parser("parse", help="Spreadsheet -> JSON")
    sp.add_argument("--input", type=Path, help="Spreadsheet to read")
    out = sp.add_mutually_exclusive_group()
    out.add_argument("--output", type=Path, help="JSON file to write")
    out.add_argument("--no-output", action="store_true", help="Validate only, do not write JSON")
    sp.add_argument("--sheet", help="Sheet name or 0-based index")
    sp.add_argument("--skip-log", type=Path, help="Directory for skipped-row JSON Lines log")

    gp = sub.add_parser("generate", help="JSON -> spreadsheet")
    gp.add_argument("--input", type=Path, help="JSON file to read")
    gp.add_argument("--output", type=Path, help="Spreadsheet to write")

    vp = sub.add_parser("validate", help="Check a JSON file for repeated keys")
    vp.add_argument("--input", type=Path, help="JSON file to check")
    return p.parse_args(argv)


def _sheet_arg(raw: str | None, default: str | int) -> str | int:
    if raw is None:
        return default
    return int(raw) if raw.isdigit() else raw


def _run_parse(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    logger = setup_logging()
    source = getattr(args, "input", None) or cfg.excel_input
    if getattr(args, "no_output", False):
        destination = None
    else:
        destination = getattr(args, "output", None) or cfg.json_output
    sheet = _sheet_arg(getattr(args, "sheet", None), cfg.sheet)
    skip_dir = getattr(args, "skip_log", None) or cfg.skip_log_dir
    skip_log = SkipLogBuffer(skip_dir) if skip_dir is not None else None

    logger.info(f"parsing spreadsheet: {source}")
    try:
        report = parse_report(source, destination, sheet=sheet, observer=skip_log)
    except (ConversionError, SheetNotFoundError) as e:
        logger.error(f"parse: {e}")
        return EXIT_FATAL
    finally:
        if skip_log is not None:
            written = skip_log.flush()
            if written is not None:
                logger.info(f"skipped rows logged: {written}")

    log_summary(render_parse_summary(report))
    return EXIT_SUCCESS


def _run_generate(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    logger = setup_logging()
    source = args.input or cfg.json_output
    destination = args.output or cfg.excel_output
    logger.info(f"generating spreadsheet: {source} -> {destination}")
    try:
        report = generate_report(source, destination)
    except ConversionError as e:
        logger.error(f"generate: {e}")
        return EXIT_FATAL
    log_summary(render_generate_summary(report))
    return EXIT_SUCCESS


def _run_validate(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    source = args.input or cfg.json_output
    valid = validate_json_file(source)
    log_summary(render_validate_summary(valid, source))
    return EXIT_SUCCESS if valid else EXIT_VALIDATION_FAILED


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # 空リスト [] はそのまま使う (None のときのみ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        enable_debug()

    config_path = args.config
    if config_path is None and os.getenv(CONFIG_ENV_VAR):
        config_path = Path(os.environ[CONFIG_ENV_VAR])
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.command == "generate":
        return _run_generate(args, cfg)
    if args.command == "validate":
        return _run_validate(args, cfg)
    return _run_parse(args, cfg)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
