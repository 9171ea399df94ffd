"""Application startup and command-line interface.

Main entry point that orchestrates configuration parsing, logging setup
and dispatch of the requested command. Every command prints a JSON
envelope (``{"ok": ..., ...}``) on stdout.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from analysis.config import ConfigManager
from analysis.parser import EnhancedResultParser
from analysis.prompts import AVAILABLE_MODELS, get_combined_analysis_prompt, get_model_prompt
from app.use_cases import (
    AnalyzeResponseUseCase,
    ImportCsvUseCase,
    LogSampleUseCase,
    ScoreSampleUseCase,
)
from config.service import ConfigurationService, ConfigurationServiceFactory
from core.result import Failure, Result, Success
from freshness.models import PARAMETER_FIELDS
from logger.excel_logger import SampleExcelLogger
from usage.limiter import FEATURES, UsageLimiter

LOG_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss}] {level}: {message}"


def configure_logging(level: str, log_file: Optional[str] = None) -> None:
    """Send loguru output to stderr at ``level``, and optionally to a rotating file."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)
    if log_file:
        logger.add(log_file, format=LOG_FORMAT, level=level, rotation="5 MB", retention=5)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fish-freshness",
        description="SNI 2729-2013 fish freshness scoring and AI analysis parsing",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    commands = parser.add_subparsers(dest="command", required=True)

    score = commands.add_parser("score", help="Score manual observations")
    for name in PARAMETER_FIELDS:
        score.add_argument(f"--{name.lower()}", type=int, help=f"{name} value (1-9, 4 is excluded)")
    score.add_argument("--fish-name")
    score.add_argument("--save", action="store_true", help="Append the sample to the workbook")

    analyze = commands.add_parser("analyze", help="Parse an AI freshness analysis")
    analyze.add_argument("file", help="Text file with the AI response, or - for stdin")
    analyze.add_argument("--user", default="local")
    analyze.add_argument("--feature", choices=list(FEATURES), default="freshness")
    analyze.add_argument("--premium", action="store_true")

    import_csv = commands.add_parser("import-csv", help="Import and rescore samples from CSV")
    import_csv.add_argument("file", help="CSV file, or - for stdin")
    import_csv.add_argument("--strict", action="store_true", help="Fail on malformed rows")

    prompt = commands.add_parser("prompt", help="Print the analysis prompt for a model")
    prompt.add_argument("--model", choices=[m.id for m in AVAILABLE_MODELS], default=AVAILABLE_MODELS[0].id)
    kind = prompt.add_mutually_exclusive_group()
    kind.add_argument("--species", action="store_true", help="Species identification prompt")
    kind.add_argument("--combined", action="store_true", help="Species and freshness prompt")

    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _run_score(args: argparse.Namespace, config_service: ConfigurationService) -> Result:
    params = {name: getattr(args, name.lower()) for name in PARAMETER_FIELDS}
    result = ScoreSampleUseCase().execute(params, fish_name=args.fish_name)
    if args.save and result.is_success():
        excel_logger = SampleExcelLogger(config_service.excel_path)
        return LogSampleUseCase(excel_logger).execute(result.unwrap())
    return result


def _run_analyze(args: argparse.Namespace, config_service: ConfigurationService) -> Result:
    parser = EnhancedResultParser(ConfigManager(config_service.raw_config))
    limiter = UsageLimiter(limit=config_service.free_tier_limit)
    use_case = AnalyzeResponseUseCase(parser, limiter)
    return use_case.execute(_read_input(args.file), args.user, args.feature, args.premium)


def _run_import_csv(args: argparse.Namespace, config_service: ConfigurationService) -> Result:
    use_case = ImportCsvUseCase(config_service.csv_delimiter, strict=args.strict)
    return use_case.execute(_read_input(args.file))


def _run_prompt(args: argparse.Namespace, config_service: ConfigurationService) -> Result:
    if args.combined:
        return Success(get_combined_analysis_prompt(args.model))
    return Success(get_model_prompt(args.model, args.species))


COMMANDS = {
    "score": _run_score,
    "analyze": _run_analyze,
    "import-csv": _run_import_csv,
    "prompt": _run_prompt,
}


def run_application(argv: Optional[List[str]] = None) -> int:
    """Main application entry point.

    Orchestrates the startup sequence:
    1. Parse configuration from all sources (defaults, files, env, CLI)
    2. Configure logging
    3. Parse the command and run its use case
    4. Print the result envelope as JSON

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    argv = sys.argv[1:] if argv is None else argv

    config_service, command_args = ConfigurationServiceFactory.create_from_args(argv)
    args = build_arg_parser().parse_args(command_args)

    configure_logging(config_service.log_level, args.log_file)
    logger.debug(f"Configuration: {config_service.to_dict()}")

    try:
        result = COMMANDS[args.command](args, config_service)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        result = Failure(e)

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0 if result.is_success() else 1
