from __future__ import annotations

import pytest

from onix_config.domain.catalog import PluginSlot, Role, StepName
from onix_config.domain.documents import (
    AdapterDocument,
    Handler,
    HttpConfig,
    Module,
    PluginBinding,
    RoutingRule,
)
from onix_config.domain.errors import PipelineInvariantError


def _router() -> PluginBinding:
    return PluginBinding(id="router", config={"routingConfig": "./config/form_router.yaml"})


def test_handler_rejects_step_without_plugin() -> None:
    # validateSign without a signValidator binding cannot run in the gateway.
    with pytest.raises(PipelineInvariantError) as excinfo:
        Handler(
            role=Role.BAP,
            plugins={PluginSlot.ROUTER: _router()},
            steps=(StepName.ADD_ROUTE, StepName.VALIDATE_SIGN),
        )
    assert "signValidator" in str(excinfo.value)


def test_handler_accepts_string_slots_and_steps() -> None:
    handler = Handler(role="bap", plugins={"router": _router()}, steps=("addRoute",))
    assert handler.role is Role.BAP
    assert handler.steps == (StepName.ADD_ROUTE,)
    assert PluginSlot.ROUTER in handler.plugins


def test_handler_to_dict_uses_gateway_keys() -> None:
    handler = Handler(role=Role.BPP, plugins={PluginSlot.ROUTER: _router()}, steps=(StepName.ADD_ROUTE,))
    data = handler.to_dict()
    assert list(data) == ["type", "role", "httpClientConfig", "plugins", "steps"]
    assert data["role"] == "bpp"
    assert data["steps"] == ["addRoute"]
    assert data["httpClientConfig"]["idleConnTimeout"] == "300s"


def test_to_dict_returns_fresh_containers() -> None:
    # Serializing twice must not share nested objects.
    binding = PluginBinding(id="cache", config={"addr": "localhost:6379"})
    first = binding.to_dict()
    second = binding.to_dict()
    assert first == second
    assert first["config"] is not second["config"]


def test_routing_rule_requires_matching_target_key() -> None:
    with pytest.raises(PipelineInvariantError):
        RoutingRule(
            domain="RET11",
            version="2.0.0",
            target_type="url",
            target={"jsonPath": "$.cookies.mock_url"},
            endpoints=("search",),
        )


def test_routing_rule_rejects_both_targets() -> None:
    with pytest.raises(PipelineInvariantError):
        RoutingRule(
            domain="RET11",
            version="2.0.0",
            target_type="jsonPath",
            target={"jsonPath": "$.cookies.mock_url", "url": "http://x"},
            endpoints=("search",),
        )


def test_routing_rule_omits_unset_proxy_flag() -> None:
    rule = RoutingRule(
        domain="RET11",
        version="2.0.0",
        target_type="url",
        target={"url": "http://x/html-form", "excludeAction": True},
        endpoints=["html-form"],
    )
    assert "actAsProxy" not in rule.to_dict()
    assert rule.endpoints == ("html-form",)


def test_adapter_document_rejects_duplicate_paths() -> None:
    handler = Handler(role=Role.BAP, plugins={PluginSlot.ROUTER: _router()}, steps=(StepName.ADD_ROUTE,))
    with pytest.raises(PipelineInvariantError):
        AdapterDocument(
            app_name="app",
            http=HttpConfig(port=8080),
            modules=(
                Module(name="a", path="/api-service/x/", handler=handler),
                Module(name="b", path="/api-service/x/", handler=handler),
            ),
        )


def test_adapter_document_lookup_by_name() -> None:
    handler = Handler(role=Role.BAP, plugins={PluginSlot.ROUTER: _router()}, steps=(StepName.ADD_ROUTE,))
    document = AdapterDocument(
        app_name="app",
        http=HttpConfig(port=8080),
        modules=(Module(name="a", path="/a/", handler=handler),),
    )
    assert document.module("a").path == "/a/"
    with pytest.raises(KeyError):
        document.module("missing")
    assert document.to_dict()["pluginManager"] == {"root": "./plugins"}
