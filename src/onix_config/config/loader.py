from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .models import AdapterParams, resolve_params


# ConfigError is raised for an unusable build descriptor (fail fast).
class ConfigError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class BuildInfo:
    # Protocol identity taken from the build descriptor's info section.
    domain: str
    version: str


def load_build_info(path: Path) -> BuildInfo:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read build descriptor {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed build descriptor {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Build descriptor root must be a mapping")

    info = raw.get("info")
    if not isinstance(info, dict):
        raise ConfigError("info must be a mapping")

    missing = [key for key in ("domain", "version") if key not in info]
    if missing:
        raise ConfigError(f"Missing required info keys: {missing}")

    # Unquoted versions load as floats, so 2.10 becomes "2.1"; descriptors should quote them.
    return BuildInfo(domain=str(info["domain"]), version=str(info["version"]))


def params_from_env(
    env: Mapping[str, str],
    *,
    domain: str,
    version: str,
    overrides: Mapping[str, Any] | None = None,
) -> AdapterParams:
    # Environment defaults mirror the gateway's docker-compose conventions.
    raw: dict[str, Any] = {
        "domain": domain,
        "version": version,
        "port": env.get("PORT") or "8080",
        "cache_address": f"{env.get('REDIS_HOST') or 'localhost'}:{env.get('REDIS_PORT') or '6379'}",
        "config_service_url": env.get("CONFIG_SERVICE_URL", ""),
        "mock_service_url": env.get("MOCK_SERVER_URL", ""),
        "audit_http_url": env.get("RECORDER_SERVICE_HTTP_URL", ""),
        "audit_grpc_url": env.get("RECORDER_SERVICE_GRPC_URL", ""),
    }
    if overrides:
        raw.update({key: value for key, value in overrides.items() if value is not None})
    return resolve_params(raw)


def load_params(
    build_path: Path | None,
    env: Mapping[str, str],
    overrides: Mapping[str, Any] | None = None,
) -> AdapterParams:
    # Descriptor supplies domain/version; explicit overrides win over it.
    overrides = dict(overrides or {})
    domain = overrides.pop("domain", None)
    version = overrides.pop("version", None)
    if build_path is not None:
        info = load_build_info(build_path)
        domain = domain if domain is not None else info.domain
        version = version if version is not None else info.version
    if domain is None or version is None:
        raise ConfigError("domain and version are required (use a build descriptor or explicit values)")
    return params_from_env(env, domain=domain, version=version, overrides=overrides)
