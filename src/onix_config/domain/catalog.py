from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import UnknownBuilderError

# Request/response action pairs handled by the gateway routers.
ALL_ACTIONS: tuple[str, ...] = (
    "search",
    "on_search",
    "select",
    "on_select",
    "init",
    "on_init",
    "confirm",
    "on_confirm",
    "status",
    "on_status",
    "update",
    "on_update",
    "cancel",
    "on_cancel",
    "track",
    "on_track",
    "issue",
    "on_issue",
)


class _Coercible(str, Enum):
    # Shared string -> member conversion; unknown values fail fast.
    @classmethod
    def category(cls) -> str:
        return cls.__name__

    @classmethod
    def coerce(cls, value: object):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise UnknownBuilderError(cls.category(), value)


class Role(_Coercible):
    # Network participant role; BAP is buyer-side, BPP is seller-side.
    BAP = "BAP"
    BPP = "BPP"

    @property
    def handler_role(self) -> str:
        return self.value.lower()


def normalize_role(value: Role | str) -> Role:
    # Case-insensitive role lookup used by every role-bearing document.
    if isinstance(value, Role):
        return value
    if not isinstance(value, str):
        raise UnknownBuilderError("Role", value)
    return Role.coerce(value.upper())


class ModuleType(_Coercible):
    RECEIVER = "receiver"
    CALLER = "caller"


def normalize_module_type(value: ModuleType | str) -> ModuleType:
    if isinstance(value, ModuleType):
        return value
    if not isinstance(value, str):
        raise UnknownBuilderError("ModuleType", value)
    return ModuleType.coerce(value.lower())


@dataclass(frozen=True, slots=True)
class WorkbenchIdentity:
    # Role/type pair for the workbench plugin; case is normalized on construction.
    role: Role
    module_type: ModuleType

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", normalize_role(self.role))
        object.__setattr__(self, "module_type", normalize_module_type(self.module_type))


class StepName(_Coercible):
    WORKBENCH_RECEIVE = "ondcWorkbenchReceiver"
    ADD_ROUTE = "addRoute"
    VALIDATE_SCHEMA = "validateSchema"
    VALIDATE_PAYLOAD = "validateOndcPayload"
    WORKBENCH_VALIDATE_CONTEXT = "ondcWorkbenchValidateContext"
    VALIDATE_SIGN = "validateSign"
    SIGN = "sign"
    AUDIT_SAVE = "validateOndcCallSave"


class PluginSlot(_Coercible):
    CACHE = "cache"
    KEY_MANAGER = "keyManager"
    MIDDLEWARE = "middleware"
    ROUTER = "router"
    SCHEMA_VALIDATOR = "schemaValidator"
    PROTOCOL_VALIDATOR = "ondcValidator"
    WORKBENCH = "ondcWorkbench"
    SIGN_VALIDATOR = "signValidator"
    SIGNER = "signer"


# Plugin slots a handler must bind for each step it declares.
STEP_REQUIREMENTS: dict[StepName, tuple[PluginSlot, ...]] = {
    StepName.WORKBENCH_RECEIVE: (PluginSlot.WORKBENCH,),
    StepName.ADD_ROUTE: (PluginSlot.ROUTER,),
    StepName.VALIDATE_SCHEMA: (PluginSlot.SCHEMA_VALIDATOR,),
    StepName.VALIDATE_PAYLOAD: (PluginSlot.PROTOCOL_VALIDATOR,),
    StepName.WORKBENCH_VALIDATE_CONTEXT: (PluginSlot.WORKBENCH,),
    StepName.VALIDATE_SIGN: (PluginSlot.SIGN_VALIDATOR,),
    StepName.SIGN: (PluginSlot.SIGNER,),
    StepName.AUDIT_SAVE: (PluginSlot.PROTOCOL_VALIDATOR, PluginSlot.CACHE),
}


class RouterKind(_Coercible):
    FORM = "form"
    MOCK = "mock"
    NETWORK_PEER = "network_peer"

    @property
    def config_name(self) -> str:
        return _ROUTER_CONFIG_NAMES[self]


_ROUTER_CONFIG_NAMES = {
    RouterKind.FORM: "form_router",
    RouterKind.MOCK: "mock_router",
    RouterKind.NETWORK_PEER: "np_router",
}


class AuditSink(_Coercible):
    MOCK = "mock"
    NETWORK_PEER = "network_peer"

    @property
    def config_name(self) -> str:
        return "mock_no_config" if self is AuditSink.MOCK else "np_no_config"

    @property
    def is_mock(self) -> bool:
        return self is AuditSink.MOCK


class PipelineKind(_Coercible):
    RECEIVER = "receiver"
    MOCK_CALLER = "mock_caller"
    FORM = "form"
    STANDALONE_VALIDATOR = "standalone_validator"


class PluginKind(_Coercible):
    CACHE = "cache"
    KEY_MANAGER = "key_manager"
    SCHEMA_VALIDATOR = "schema_validator"
    PROTOCOL_VALIDATOR = "protocol_validator"
    SIGN_VALIDATOR = "sign_validator"
    SIGNER = "signer"
    ROUTER = "router"
    OBSERVABILITY = "observability"
    WORKBENCH = "workbench"
