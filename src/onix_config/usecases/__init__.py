from .audit import audit_field_map, build_audit_remap
from .bindings import build_binding
from .env_file import render_gateway_env, service_name
from .pipelines import assemble_handler, build_handler_registry
from .registry import assemble_adapter_document, module_path
from .routing import build_routing_table
from .synthesize import DocumentSet, build_documents, synthesize

__all__ = [
    "DocumentSet",
    "assemble_adapter_document",
    "assemble_handler",
    "audit_field_map",
    "build_audit_remap",
    "build_binding",
    "build_documents",
    "build_handler_registry",
    "build_routing_table",
    "module_path",
    "render_gateway_env",
    "service_name",
    "synthesize",
]
