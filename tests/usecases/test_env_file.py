from __future__ import annotations

from onix_config.config.models import AdapterParams
from onix_config.usecases.env_file import render_gateway_env, service_name


def test_service_name_uses_colons_and_lower_case() -> None:
    assert service_name("ONDC:RET11", "2.0.0") == "onix-ondc:ret11:2:0:0"
    assert service_name("nic2004.60232", "1.2.5") == "onix-nic2004:60232:1:2:5"


def test_render_gateway_env_maps_signing_identity() -> None:
    params = AdapterParams(domain="ONDC:RET11", version="2.0.0", port=8080, cache_address="redis:6379")
    env = {
        "SUBSCRIBER_ID": "workbench.example",
        "UKID": "key-1",
        "SIGN_PRIVATE_KEY": "priv",
        "SIGN_PUBLIC_KEY": "pub",
        "IN_HOUSE_REGISTRY": "http://registry",
        "REDIS_PASSWORD": 'p"w',
    }
    text = render_gateway_env(params, env)
    assert text.splitlines() == [
        'SUBSCRIBER_ID="workbench.example"',
        'UNIQUE_KEY_ID="key-1"',
        'SIGNING_PRIVATE="priv"',
        'SIGNING_PUBLIC="pub"',
        'IN_HOUSE_URL="http://registry"',
        'REDIS_PASSWORD="p\\"w"',
        'REDIS_USERNAME=""',
        'PORT="8080"',
        'SERVICE_NAME="onix-ondc:ret11:2:0:0"',
    ]
    assert text.endswith("\n")
