from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from onix_config.adapters.serializer import dump_document
from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import AuditSink, RouterKind
from onix_config.domain.documents import AdapterDocument, AuditRemap, RoutingTable
from onix_config.usecases.audit import build_audit_remap
from onix_config.usecases.registry import assemble_adapter_document
from onix_config.usecases.routing import build_routing_table

ADAPTER_FILE = "adapter.yaml"

# Output order of the document set.
ROUTER_ORDER: tuple[RouterKind, ...] = (RouterKind.FORM, RouterKind.MOCK, RouterKind.NETWORK_PEER)
AUDIT_ORDER: tuple[AuditSink, ...] = (AuditSink.MOCK, AuditSink.NETWORK_PEER)


@dataclass(frozen=True, slots=True)
class DocumentSet:
    # Every document produced by one synthesis run, before serialization.
    adapter: AdapterDocument
    routers: dict[RouterKind, RoutingTable]
    audits: dict[AuditSink, AuditRemap]

    def items(self) -> Iterator[tuple[str, AdapterDocument | RoutingTable | AuditRemap]]:
        yield ADAPTER_FILE, self.adapter
        for router in ROUTER_ORDER:
            yield f"{router.config_name}.yaml", self.routers[router]
        for sink in AUDIT_ORDER:
            yield f"{sink.config_name}.yaml", self.audits[sink]


def build_documents(params: AdapterParams) -> DocumentSet:
    return DocumentSet(
        adapter=assemble_adapter_document(params),
        routers={router: build_routing_table(router, params) for router in ROUTER_ORDER},
        audits={sink: build_audit_remap(sink, params) for sink in AUDIT_ORDER},
    )


def synthesize(params: AdapterParams) -> dict[str, str]:
    """Render the full gateway configuration for one parameter set.

    Returns relative file path -> YAML text in a fixed order. Nothing is
    written; callers hand the mapping to a ConfigWriter.
    """
    return {path: dump_document(document) for path, document in build_documents(params).items()}
