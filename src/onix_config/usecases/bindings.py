from __future__ import annotations

from typing import Any

from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import AuditSink, PluginKind, RouterKind, WorkbenchIdentity
from onix_config.domain.documents import PluginBinding
from onix_config.domain.errors import UnknownBuilderError

# Plugin bindings are built from explicit arguments only; identical inputs give
# structurally identical bindings.


def cache_binding(params: AdapterParams) -> PluginBinding:
    return PluginBinding(id="cache", config={"addr": params.cache_address})


def key_manager_binding() -> PluginBinding:
    return PluginBinding(id="keymanager")


def schema_validator_binding() -> PluginBinding:
    return PluginBinding(id="schemavalidator", config={"schemaDir": "./schemas"})


def protocol_validator_binding(*, stateful: bool) -> PluginBinding:
    # Only the stateful flag varies between full receivers and the standalone validator.
    return PluginBinding(
        id="ondcvalidator",
        config={"stateFullValidations": stateful, "debugMode": False},
    )


def sign_validator_binding() -> PluginBinding:
    return PluginBinding(id="signvalidator")


def signer_binding() -> PluginBinding:
    return PluginBinding(id="signer")


def router_binding(router: RouterKind | str) -> PluginBinding:
    router = RouterKind.coerce(router)
    return PluginBinding(
        id="router",
        config={"routingConfig": f"./config/{router.config_name}.yaml"},
    )


def observability_binding(sink: AuditSink | str) -> PluginBinding:
    sink = AuditSink.coerce(sink)
    return PluginBinding(
        id="networkobservability",
        config={"configPath": f"./config/{sink.config_name}.yaml"},
    )


def workbench_binding(params: AdapterParams, identity: WorkbenchIdentity) -> PluginBinding:
    return PluginBinding(
        id="workbench",
        config={
            "protocolVersion": params.version,
            "protocolDomain": params.domain,
            "moduleRole": identity.role.value,
            "moduleType": identity.module_type.value,
            "configServiceURL": params.config_service_url,
            "mockServiceURL": params.mock_service_url,
        },
    )


def build_binding(kind: PluginKind | str, params: AdapterParams, **context: Any) -> PluginBinding:
    """Build a binding by kind name.

    Context keywords per kind: ``stateful`` (protocol_validator), ``router``
    (router), ``sink`` (observability), ``role`` and ``module_type``
    (workbench). A missing keyword is a programming error and raises
    ``TypeError``; an unknown kind raises ``UnknownBuilderError``.
    """
    kind = PluginKind.coerce(kind)
    if kind is PluginKind.CACHE:
        return cache_binding(params)
    if kind is PluginKind.KEY_MANAGER:
        return key_manager_binding()
    if kind is PluginKind.SCHEMA_VALIDATOR:
        return schema_validator_binding()
    if kind is PluginKind.PROTOCOL_VALIDATOR:
        return protocol_validator_binding(stateful=_require(context, "stateful", kind))
    if kind is PluginKind.SIGN_VALIDATOR:
        return sign_validator_binding()
    if kind is PluginKind.SIGNER:
        return signer_binding()
    if kind is PluginKind.ROUTER:
        return router_binding(_require(context, "router", kind))
    if kind is PluginKind.OBSERVABILITY:
        return observability_binding(_require(context, "sink", kind))
    if kind is PluginKind.WORKBENCH:
        identity = WorkbenchIdentity(
            role=_require(context, "role", kind),
            module_type=_require(context, "module_type", kind),
        )
        return workbench_binding(params, identity)
    raise UnknownBuilderError(PluginKind.category(), kind)


def _require(context: dict[str, Any], key: str, kind: PluginKind) -> Any:
    if key not in context:
        raise TypeError(f"{kind.value} binding requires '{key}'")
    return context[key]
