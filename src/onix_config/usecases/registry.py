from __future__ import annotations

from dataclasses import dataclass

from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import PipelineKind, Role
from onix_config.domain.documents import AdapterDocument, HttpConfig, Module
from onix_config.kernel.handler_registry import HandlerRegistry
from onix_config.usecases.pipelines import assemble_handler, build_handler_registry

SERVICE_ROOT = "api-service"


@dataclass(frozen=True, slots=True)
class ModuleDecl:
    # Static declaration of one route-addressable module.
    name: str
    segment: str
    kind: PipelineKind
    role: Role | None = None


# Order is preserved in adapter.yaml.
MODULE_DECLS: tuple[ModuleDecl, ...] = (
    ModuleDecl("formReceiver", "form/html-form", PipelineKind.FORM),
    ModuleDecl("standaloneValidator", "test/", PipelineKind.STANDALONE_VALIDATOR),
    ModuleDecl("BapTxnReceiver", "seller/", PipelineKind.RECEIVER, Role.BAP),
    ModuleDecl("BppTxnReceiver", "buyer/", PipelineKind.RECEIVER, Role.BPP),
    ModuleDecl("mockTxnCaller", "mock/", PipelineKind.MOCK_CALLER),
)


def module_path(params: AdapterParams, segment: str) -> str:
    return f"/{SERVICE_ROOT}/{params.domain}/{params.version}/{segment}"


def app_name(params: AdapterParams) -> str:
    # Used downstream as the deployment identifier.
    return f"workbench-onix-{params.domain}-{params.version}"


def assemble_adapter_document(
    params: AdapterParams,
    *,
    registry: HandlerRegistry | None = None,
    modules: tuple[ModuleDecl, ...] = MODULE_DECLS,
) -> AdapterDocument:
    registry = registry if registry is not None else build_handler_registry()
    return AdapterDocument(
        app_name=app_name(params),
        http=HttpConfig(port=params.port),
        modules=tuple(
            Module(
                name=decl.name,
                path=module_path(params, decl.segment),
                handler=assemble_handler(decl.kind, params, decl.role, registry=registry),
            )
            for decl in modules
        ),
    )
