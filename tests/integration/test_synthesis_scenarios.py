from __future__ import annotations

from onix_config.adapters.serializer import dump_yaml, load_yaml
from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import ALL_ACTIONS
from onix_config.usecases.synthesize import build_documents, synthesize


def _params(**overrides: object) -> AdapterParams:
    raw: dict[str, object] = {
        "domain": "RET11",
        "version": "2.0.0",
        "port": 8080,
        "cache_address": "localhost:6379",
        "mock_service_url": "http://mock",
        "config_service_url": "http://cfg",
        "audit_http_url": "http://audit-http",
        "audit_grpc_url": "audit-grpc:9000",
    }
    raw.update(overrides)
    return AdapterParams.model_validate(raw)


def test_synthesize_produces_six_files_in_order() -> None:
    assert list(synthesize(_params())) == [
        "adapter.yaml",
        "form_router.yaml",
        "mock_router.yaml",
        "np_router.yaml",
        "mock_no_config.yaml",
        "np_no_config.yaml",
    ]


def test_synthesis_is_deterministic() -> None:
    assert synthesize(_params()) == synthesize(_params())


def test_every_output_round_trips() -> None:
    for text in synthesize(_params()).values():
        assert dump_yaml(load_yaml(text)) == text


def test_seller_module_scenario() -> None:
    adapter = load_yaml(synthesize(_params())["adapter.yaml"])
    (seller,) = [module for module in adapter["modules"] if module["path"].endswith("/RET11/2.0.0/seller/")]
    steps = seller["handler"]["steps"]
    assert len(steps) == 7
    assert steps[0] == "ondcWorkbenchReceiver"
    assert steps[-1] == "validateOndcCallSave"
    assert seller["handler"]["plugins"]["cache"]["config"]["addr"] == "localhost:6379"


def test_mock_router_scenario() -> None:
    data = load_yaml(synthesize(_params())["mock_router.yaml"])
    (rule,) = data["routingRules"]
    assert rule["targetType"] == "jsonPath"
    assert rule["target"]["jsonPath"] == "$.cookies.subscriber_url"
    assert rule["actAsProxy"] is True
    assert rule["endpoints"] == list(ALL_ACTIONS)


def test_audit_documents_differ_only_in_mock_flag() -> None:
    files = synthesize(_params())
    mock = load_yaml(files["mock_no_config.yaml"])
    peer = load_yaml(files["np_no_config.yaml"])
    assert mock["remap"].pop("is_mock") is True
    assert peer["remap"].pop("is_mock") is False
    mock.pop("grpc_target")
    peer.pop("grpc_target")
    assert mock == peer


def test_module_paths_are_pairwise_distinct() -> None:
    adapter = load_yaml(synthesize(_params())["adapter.yaml"])
    paths = [module["path"] for module in adapter["modules"]]
    assert len(paths) == 5
    assert len(set(paths)) == 5


def test_empty_domain_and_version_produce_valid_documents() -> None:
    files = synthesize(_params(domain="", version=""))
    adapter = load_yaml(files["adapter.yaml"])
    assert adapter["appName"] == "workbench-onix--"
    assert adapter["modules"][2]["path"] == "/api-service///seller/"
    rule = load_yaml(files["np_router.yaml"])["routingRules"][0]
    assert rule["domain"] == ""
    assert rule["version"] == ""


def test_build_documents_matches_serialized_output() -> None:
    documents = build_documents(_params())
    adapter = load_yaml(synthesize(_params())["adapter.yaml"])
    assert adapter == documents.adapter.to_dict()
    assert [path for path, _ in documents.items()][0] == "adapter.yaml"
