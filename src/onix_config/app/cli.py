from __future__ import annotations

import argparse
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from onix_config.adapters.config_writer import FileConfigWriter
from onix_config.adapters.log_sinks import JsonlLogSink, StdoutLogSink
from onix_config.config.loader import ConfigError, load_params
from onix_config.config.models import AdapterParams
from onix_config.domain.errors import SynthesisError
from onix_config.domain.log_message import LogMessage
from onix_config.ports.log_sink import LogSink
from onix_config.usecases.env_file import render_gateway_env
from onix_config.usecases.synthesize import synthesize

# The CLI is a thin orchestration wrapper; synthesis itself is pure and never logs.

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="onix-config", description="ONIX adapter config synthesizer")
    parser.add_argument("--build", help="Path to build descriptor YAML (info.domain / info.version)")
    parser.add_argument("--out", required=True, help="Config root the YAML files are written to")
    parser.add_argument("--domain", help="Override protocol domain")
    parser.add_argument("--version", help="Override protocol version")
    parser.add_argument("--port", help="Override gateway listening port")
    parser.add_argument("--env-file", help="Also write the gateway .env to this path")
    parser.add_argument("--dry-run", action="store_true", help="Log the file list without writing")
    parser.add_argument("--log-path", help="Write JSONL logs here instead of stdout")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def collect_overrides(args: argparse.Namespace) -> dict[str, object]:
    # CLI values take precedence over the build descriptor and environment.
    return {
        key: value
        for key, value in (("domain", args.domain), ("version", args.version), ("port", args.port))
        if value is not None
    }


def run(
    argv: Sequence[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
    log_sink: LogSink | None = None,
) -> int:
    args = parse_args(argv)
    env = env if env is not None else os.environ
    owned_sink: JsonlLogSink | None = None
    if log_sink is None:
        if args.log_path:
            owned_sink = JsonlLogSink(Path(args.log_path))
            log_sink = owned_sink
        else:
            log_sink = StdoutLogSink()
    try:
        return _run(args, env, log_sink)
    finally:
        if owned_sink is not None:
            owned_sink.close()


def _run(args: argparse.Namespace, env: Mapping[str, str], log_sink: LogSink) -> int:
    build_path = Path(args.build) if args.build else None
    try:
        params = load_params(build_path, env, collect_overrides(args))
        files = synthesize(params)
    except (ConfigError, SynthesisError) as exc:
        log_sink.emit(LogMessage(level="error", message="adapter config synthesis failed", fields=_error_fields(exc)))
        return EXIT_CONFIG_ERROR

    log_sink.emit(LogMessage(level="info", message="adapter config parameters", fields=_param_fields(params)))

    if args.dry_run:
        log_sink.emit(
            LogMessage(level="info", message="dry run, nothing written", fields={"files": list(files)})
        )
        return EXIT_OK

    # Each file is committed by rename; readers never see a partial write.
    written = FileConfigWriter(Path(args.out), atomic_replace=True).write_all(files)
    log_sink.emit(
        LogMessage(
            level="info",
            message="adapter config files written",
            fields={"root": args.out, "files": [path.name for path in written]},
        )
    )

    if args.env_file:
        env_path = Path(args.env_file)
        env_writer = FileConfigWriter(env_path.parent, atomic_replace=True)
        env_writer.write_all({env_path.name: render_gateway_env(params, env)})
        log_sink.emit(LogMessage(level="info", message="gateway env file written", fields={"path": str(env_path)}))
    return EXIT_OK


def _param_fields(params: AdapterParams) -> dict[str, object]:
    return params.model_dump()


def _error_fields(exc: Exception) -> dict[str, object]:
    fields: dict[str, object] = {"error": type(exc).__name__, "detail": str(exc)}
    field = getattr(exc, "field", None)
    if field is not None:
        fields["field"] = field
    return fields
