from .cli import build_parser, collect_overrides, parse_args, run

# app package exports CLI helpers for reuse in tests and entrypoints.
__all__ = ["build_parser", "collect_overrides", "parse_args", "run"]
