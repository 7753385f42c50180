from __future__ import annotations

from collections.abc import Mapping

from onix_config.config.models import AdapterParams

ENV_FILE = ".env"

# Gateway variable -> source environment variable.
_PASSTHROUGH: tuple[tuple[str, str], ...] = (
    ("SUBSCRIBER_ID", "SUBSCRIBER_ID"),
    ("UNIQUE_KEY_ID", "UKID"),
    ("SIGNING_PRIVATE", "SIGN_PRIVATE_KEY"),
    ("SIGNING_PUBLIC", "SIGN_PUBLIC_KEY"),
    ("IN_HOUSE_URL", "IN_HOUSE_REGISTRY"),
    ("REDIS_PASSWORD", "REDIS_PASSWORD"),
    ("REDIS_USERNAME", "REDIS_USERNAME"),
)


def service_name(domain: str, version: str) -> str:
    # ONDC:RET11 / 2.0.0 -> onix-ondc:ret11:2:0:0
    return f"onix-{domain}:{version}".replace(".", ":").lower()


def render_gateway_env(params: AdapterParams, env: Mapping[str, str]) -> str:
    lines = [f'{name}="{_quote(env.get(source, ""))}"' for name, source in _PASSTHROUGH]
    lines.append(f'PORT="{params.port}"')
    lines.append(f'SERVICE_NAME="{service_name(params.domain, params.version)}"')
    return "\n".join(lines) + "\n"


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')
