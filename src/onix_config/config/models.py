from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from onix_config.domain.errors import InvalidParameterError

# Deployment parameters consumed by every builder; resolved before synthesis starts.

_HOST_PORT = re.compile(r"^(?:\[[^\]\s]+\]|[^\s:\[\]]+):(\d{1,5})$")


class AdapterParams(BaseModel):
    # Empty domain/version/URLs are allowed and interpolated as empty strings.
    model_config = ConfigDict(extra="forbid", frozen=True)
    domain: str
    version: str
    port: int = Field(gt=0, le=65535)
    cache_address: str
    config_service_url: str = ""
    mock_service_url: str = ""
    audit_http_url: str = ""
    audit_grpc_url: str = ""

    @field_validator("cache_address")
    @classmethod
    def _check_cache_address(cls, value: str) -> str:
        match = _HOST_PORT.match(value)
        if match is None:
            raise ValueError("must be in host:port format")
        if not 0 < int(match.group(1)) <= 65535:
            raise ValueError("port must be between 1 and 65535")
        return value


def resolve_params(raw: Mapping[str, Any]) -> AdapterParams:
    # Single entry point turning raw values into AdapterParams with a field-level error.
    try:
        return AdapterParams.model_validate(dict(raw))
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise InvalidParameterError(field, first["msg"]) from exc
