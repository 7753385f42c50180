from __future__ import annotations

from typing import Any

from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import AuditSink
from onix_config.domain.documents import AuditRemap

# Values starting with "$." are paths resolved by the gateway at request time;
# they are emitted verbatim. "uuid()" is likewise resolved downstream.


def audit_field_map(*, is_mock: bool) -> dict[str, Any]:
    return {
        "payload_id": "uuid()",
        "transaction_id": "$.requestBody.context.transaction_id",
        "message_id": "$.requestBody.context.message_id",
        "subscriber_url": "$.ctx.cookies.subscriber_url",
        "action": "$.requestBody.context.action",
        "timestamp": "$.requestBody.context.timestamp",
        "api_name": "$.requestBody.context.action",
        "status_code": "$.ctx.status",
        "ttl_seconds": "$.ctx.cookies.ttl_seconds",
        "cache_ttl_seconds": 0,
        "is_mock": is_mock,
        "session_id": "$.ctx.cookies.session_id",
        "req_headers": "$.ctx.headers_all",
    }


def build_audit_remap(sink: AuditSink | str, params: AdapterParams) -> AuditRemap:
    sink = AuditSink.coerce(sink)
    return AuditRemap(target=params.audit_grpc_url, field_map=audit_field_map(is_mock=sink.is_mock))
