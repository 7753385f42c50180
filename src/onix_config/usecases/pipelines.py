from __future__ import annotations

from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import (
    AuditSink,
    ModuleType,
    PipelineKind,
    PluginSlot,
    Role,
    RouterKind,
    StepName,
    WorkbenchIdentity,
    normalize_role,
)
from onix_config.domain.documents import Handler
from onix_config.kernel.handler_registry import HandlerRegistry
from onix_config.usecases.bindings import (
    cache_binding,
    key_manager_binding,
    observability_binding,
    protocol_validator_binding,
    router_binding,
    schema_validator_binding,
    sign_validator_binding,
    signer_binding,
    workbench_binding,
)

# Step order is observable gateway behavior: context is established first,
# then schema, protocol and crypto checks; audit save is always last.

RECEIVER_STEPS: tuple[StepName, ...] = (
    StepName.WORKBENCH_RECEIVE,
    StepName.ADD_ROUTE,
    StepName.VALIDATE_SCHEMA,
    StepName.VALIDATE_PAYLOAD,
    StepName.WORKBENCH_VALIDATE_CONTEXT,
    StepName.VALIDATE_SIGN,
    StepName.AUDIT_SAVE,
)

MOCK_CALLER_STEPS: tuple[StepName, ...] = (
    StepName.WORKBENCH_RECEIVE,
    StepName.ADD_ROUTE,
    StepName.VALIDATE_SCHEMA,
    StepName.WORKBENCH_VALIDATE_CONTEXT,
    StepName.SIGN,
    StepName.AUDIT_SAVE,
)

FORM_STEPS: tuple[StepName, ...] = (StepName.ADD_ROUTE,)

STANDALONE_VALIDATOR_STEPS: tuple[StepName, ...] = (
    StepName.VALIDATE_SCHEMA,
    StepName.VALIDATE_PAYLOAD,
)


def receiver_handler(params: AdapterParams, role: Role | str | None) -> Handler:
    if role is None:
        raise TypeError("receiver handler requires a role")
    role = normalize_role(role)
    return Handler(
        role=role,
        plugins={
            PluginSlot.CACHE: cache_binding(params),
            PluginSlot.KEY_MANAGER: key_manager_binding(),
            PluginSlot.MIDDLEWARE: (observability_binding(AuditSink.NETWORK_PEER),),
            PluginSlot.ROUTER: router_binding(RouterKind.NETWORK_PEER),
            PluginSlot.SCHEMA_VALIDATOR: schema_validator_binding(),
            PluginSlot.PROTOCOL_VALIDATOR: protocol_validator_binding(stateful=True),
            PluginSlot.WORKBENCH: workbench_binding(
                params, WorkbenchIdentity(role=role, module_type=ModuleType.RECEIVER)
            ),
            PluginSlot.SIGN_VALIDATOR: sign_validator_binding(),
        },
        steps=RECEIVER_STEPS,
    )


def mock_caller_handler(params: AdapterParams, role: Role | str | None = None) -> Handler:
    # The mock caller always impersonates the seller side; the role argument is ignored.
    _ = role
    return Handler(
        role=Role.BPP,
        plugins={
            PluginSlot.CACHE: cache_binding(params),
            PluginSlot.KEY_MANAGER: key_manager_binding(),
            PluginSlot.MIDDLEWARE: (observability_binding(AuditSink.MOCK),),
            PluginSlot.ROUTER: router_binding(RouterKind.MOCK),
            PluginSlot.SCHEMA_VALIDATOR: schema_validator_binding(),
            PluginSlot.PROTOCOL_VALIDATOR: protocol_validator_binding(stateful=True),
            PluginSlot.WORKBENCH: workbench_binding(
                params, WorkbenchIdentity(role=Role.BAP, module_type=ModuleType.CALLER)
            ),
            PluginSlot.SIGNER: signer_binding(),
        },
        steps=MOCK_CALLER_STEPS,
    )


def form_handler(params: AdapterParams, role: Role | str | None = None) -> Handler:
    # Pure forwarder for form submissions; no validation or signing.
    _ = params, role
    return Handler(
        role=Role.BAP,
        plugins={PluginSlot.ROUTER: router_binding(RouterKind.FORM)},
        steps=FORM_STEPS,
    )


def standalone_validator_handler(params: AdapterParams, role: Role | str | None = None) -> Handler:
    # Stateless single-pass validation: no router, no persistence.
    _ = params, role
    return Handler(
        role=Role.BAP,
        plugins={
            PluginSlot.SCHEMA_VALIDATOR: schema_validator_binding(),
            PluginSlot.PROTOCOL_VALIDATOR: protocol_validator_binding(stateful=False),
        },
        steps=STANDALONE_VALIDATOR_STEPS,
    )


def build_handler_registry() -> HandlerRegistry:
    registry = HandlerRegistry()
    registry.register(PipelineKind.RECEIVER, receiver_handler)
    registry.register(PipelineKind.MOCK_CALLER, mock_caller_handler)
    registry.register(PipelineKind.FORM, form_handler)
    registry.register(PipelineKind.STANDALONE_VALIDATOR, standalone_validator_handler)
    return registry


def assemble_handler(
    kind: PipelineKind | str,
    params: AdapterParams,
    role: Role | str | None = None,
    *,
    registry: HandlerRegistry | None = None,
) -> Handler:
    registry = registry if registry is not None else build_handler_registry()
    return registry.get(kind)(params, role)
