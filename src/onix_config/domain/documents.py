from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .catalog import STEP_REQUIREMENTS, PluginSlot, Role, StepName, normalize_role
from .errors import PipelineInvariantError

# Documents are plain value objects; to_dict() always returns fresh containers
# so no two serialized nodes share identity.


def _plain(value: Any) -> Any:
    # Deep copy into builtin containers; str enums collapse to their values.
    if isinstance(value, Mapping):
        return {_plain(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, str):
        return str(value.value) if hasattr(value, "value") else value
    return value


@dataclass(frozen=True, slots=True)
class PluginBinding:
    id: str
    config: Mapping[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id}
        if self.config is not None:
            out["config"] = _plain(self.config)
        return out


PluginEntry = PluginBinding | tuple[PluginBinding, ...]


@dataclass(frozen=True, slots=True)
class HttpClientConfig:
    max_idle_conns: int = 1000
    max_idle_conns_per_host: int = 200
    idle_conn_timeout: str = "300s"
    response_header_timeout: str = "5s"

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxIdleConns": self.max_idle_conns,
            "maxIdleConnsPerHost": self.max_idle_conns_per_host,
            "idleConnTimeout": self.idle_conn_timeout,
            "responseHeaderTimeout": self.response_header_timeout,
        }


@dataclass(frozen=True, slots=True)
class Handler:
    # One pipeline bound to a role: ordered steps plus the plugins they run on.
    role: Role
    plugins: Mapping[PluginSlot, PluginEntry]
    steps: tuple[StepName, ...]
    type: str = "std"
    http_client: HttpClientConfig = field(default_factory=HttpClientConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", normalize_role(self.role))
        object.__setattr__(self, "steps", tuple(StepName.coerce(step) for step in self.steps))
        plugins = {PluginSlot.coerce(slot): entry for slot, entry in self.plugins.items()}
        object.__setattr__(self, "plugins", plugins)
        for step in self.steps:
            missing = [slot.value for slot in STEP_REQUIREMENTS[step] if slot not in plugins]
            if missing:
                raise PipelineInvariantError(
                    f"Step '{step.value}' requires plugin slot(s) {missing} on the {self.role.value} handler"
                )

    def to_dict(self) -> dict[str, Any]:
        plugins: dict[str, Any] = {}
        for slot, entry in self.plugins.items():
            if isinstance(entry, PluginBinding):
                plugins[slot.value] = entry.to_dict()
            else:
                plugins[slot.value] = [binding.to_dict() for binding in entry]
        return {
            "type": self.type,
            "role": self.role.handler_role,
            "httpClientConfig": self.http_client.to_dict(),
            "plugins": plugins,
            "steps": [step.value for step in self.steps],
        }


@dataclass(frozen=True, slots=True)
class Module:
    name: str
    path: str
    handler: Handler

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "path": self.path, "handler": self.handler.to_dict()}


@dataclass(frozen=True, slots=True)
class RoutingRule:
    # Forwarding rule: literal url target or a jsonPath read from the request, never both.
    domain: str
    version: str
    target_type: str
    target: Mapping[str, Any]
    endpoints: tuple[str, ...]
    act_as_proxy: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoints", tuple(self.endpoints))
        has_url = "url" in self.target
        has_path = "jsonPath" in self.target
        if self.target_type == "url":
            ok = has_url and not has_path
        elif self.target_type == "jsonPath":
            ok = has_path and not has_url
        else:
            raise PipelineInvariantError(f"Unsupported targetType: {self.target_type!r}")
        if not ok:
            raise PipelineInvariantError(
                f"targetType '{self.target_type}' rule must carry exactly one matching target key"
            )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "domain": self.domain,
            "version": self.version,
            "targetType": self.target_type,
            "target": _plain(self.target),
        }
        if self.act_as_proxy is not None:
            out["actAsProxy"] = self.act_as_proxy
        out["endpoints"] = list(self.endpoints)
        return out


@dataclass(frozen=True, slots=True)
class RoutingTable:
    rules: tuple[RoutingRule, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"routingRules": [rule.to_dict() for rule in self.rules]}


@dataclass(frozen=True, slots=True)
class AuditRemap:
    # Projection of a request/response context into an audit event.
    target: str
    field_map: Mapping[str, Any]
    transport: str = "grpc"
    insecure: bool = True
    method: str = "/beckn.audit.v1.AuditService/LogEvent"
    timeout_ms: int = 5000
    is_async: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "transport": self.transport,
            "grpc_target": self.target,
            "grpc_insecure": self.insecure,
            "grpc_method": self.method,
            "grpc_timeout_ms": self.timeout_ms,
            "async": self.is_async,
            "remap": _plain(self.field_map),
        }


@dataclass(frozen=True, slots=True)
class LogConfig:
    level: str = "debug"
    destinations: tuple[str, ...] = ("stdout",)
    context_keys: tuple[str, ...] = ("transaction_id", "message_id", "subscriber_id", "module_id")

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "destinations": [{"type": kind} for kind in self.destinations],
            "contextKeys": list(self.context_keys),
        }


@dataclass(frozen=True, slots=True)
class HttpConfig:
    port: int
    read_timeout: int = 30
    write_timeout: int = 30
    idle_timeout: int = 30

    def to_dict(self) -> dict[str, Any]:
        return {
            "port": self.port,
            "timeout": {
                "read": self.read_timeout,
                "write": self.write_timeout,
                "idle": self.idle_timeout,
            },
        }


@dataclass(frozen=True, slots=True)
class AdapterDocument:
    # Root aggregate rendered to adapter.yaml.
    app_name: str
    http: HttpConfig
    modules: tuple[Module, ...]
    log: LogConfig = field(default_factory=LogConfig)
    plugin_root: str = "./plugins"

    def __post_init__(self) -> None:
        object.__setattr__(self, "modules", tuple(self.modules))
        seen: set[str] = set()
        for module in self.modules:
            if module.path in seen:
                raise PipelineInvariantError(f"Duplicate module path: {module.path}")
            seen.add(module.path)

    def module(self, name: str) -> Module:
        for module in self.modules:
            if module.name == name:
                return module
        raise KeyError(name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "appName": self.app_name,
            "log": self.log.to_dict(),
            "http": self.http.to_dict(),
            "pluginManager": {"root": self.plugin_root},
            "modules": [module.to_dict() for module in self.modules],
        }
