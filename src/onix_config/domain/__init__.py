from .catalog import (
    ALL_ACTIONS,
    STEP_REQUIREMENTS,
    AuditSink,
    ModuleType,
    PipelineKind,
    PluginKind,
    PluginSlot,
    Role,
    RouterKind,
    StepName,
    WorkbenchIdentity,
    normalize_module_type,
    normalize_role,
)
from .documents import (
    AdapterDocument,
    AuditRemap,
    Handler,
    HttpClientConfig,
    HttpConfig,
    LogConfig,
    Module,
    PluginBinding,
    RoutingRule,
    RoutingTable,
)
from .errors import (
    InvalidParameterError,
    PipelineInvariantError,
    SerializationError,
    SynthesisError,
    UnknownBuilderError,
)
from .log_message import LogMessage

# Public domain exports keep imports explicit across layers.
__all__ = [
    "ALL_ACTIONS",
    "STEP_REQUIREMENTS",
    "AdapterDocument",
    "AuditRemap",
    "AuditSink",
    "Handler",
    "HttpClientConfig",
    "HttpConfig",
    "InvalidParameterError",
    "LogConfig",
    "LogMessage",
    "Module",
    "ModuleType",
    "PipelineInvariantError",
    "PipelineKind",
    "PluginBinding",
    "PluginKind",
    "PluginSlot",
    "Role",
    "RouterKind",
    "RoutingRule",
    "RoutingTable",
    "SerializationError",
    "StepName",
    "SynthesisError",
    "UnknownBuilderError",
    "WorkbenchIdentity",
    "normalize_module_type",
    "normalize_role",
]
