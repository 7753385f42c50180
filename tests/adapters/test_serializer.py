from __future__ import annotations

import pytest

from onix_config.adapters.serializer import dump_document, dump_yaml, load_yaml
from onix_config.config.models import AdapterParams
from onix_config.domain.errors import SerializationError
from onix_config.usecases.registry import assemble_adapter_document
from onix_config.usecases.routing import build_routing_table


def _params() -> AdapterParams:
    return AdapterParams(
        domain="RET11",
        version="2.0.0",
        port=8080,
        cache_address="localhost:6379",
        audit_http_url="http://audit-http",
    )


def test_dump_yaml_preserves_construction_order() -> None:
    assert dump_yaml({"b": 1, "a": 2}) == "b: 1\na: 2\n"


def test_dump_yaml_never_emits_aliases() -> None:
    # Shared sub-structures are expanded rather than anchored.
    shared = {"maxIdleConns": 1000}
    text = dump_yaml({"first": shared, "second": shared})
    assert "&" not in text
    assert "*" not in text
    assert text.count("maxIdleConns") == 2


def test_form_router_yaml_text() -> None:
    text = dump_document(build_routing_table("form", _params()))
    assert text == (
        "routingRules:\n"
        "- domain: RET11\n"
        "  version: 2.0.0\n"
        "  targetType: url\n"
        "  target:\n"
        "    url: http://audit-http/html-form\n"
        "    excludeAction: true\n"
        "  endpoints:\n"
        "  - html-form\n"
    )


def test_adapter_yaml_round_trips() -> None:
    # Load + re-dump with the same serializer yields identical text.
    text = dump_document(assemble_adapter_document(_params()))
    assert dump_yaml(load_yaml(text)) == text
    assert "&id" not in text


def test_unrepresentable_value_raises_serialization_error() -> None:
    with pytest.raises(SerializationError):
        dump_yaml({"value": object()})
