from __future__ import annotations

from collections.abc import Sequence

from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import ALL_ACTIONS, RouterKind
from onix_config.domain.documents import RoutingRule, RoutingTable

FORM_ENDPOINT = "html-form"


def build_routing_table(
    router: RouterKind | str,
    params: AdapterParams,
    actions: Sequence[str] = ALL_ACTIONS,
) -> RoutingTable:
    # Exactly one rule per router; unknown routers fail in RouterKind.coerce.
    router = RouterKind.coerce(router)
    if router is RouterKind.FORM:
        rule = RoutingRule(
            domain=params.domain,
            version=params.version,
            target_type="url",
            target={"url": f"{params.audit_http_url}/{FORM_ENDPOINT}", "excludeAction": True},
            endpoints=(FORM_ENDPOINT,),
        )
    elif router is RouterKind.MOCK:
        # Mock traffic is proxied to the subscriber the test session points at.
        rule = _cookie_rule(params, cookie="subscriber_url", act_as_proxy=True, actions=actions)
    else:
        rule = _cookie_rule(params, cookie="mock_url", act_as_proxy=False, actions=actions)
    return RoutingTable(rules=(rule,))


def _cookie_rule(
    params: AdapterParams,
    *,
    cookie: str,
    act_as_proxy: bool,
    actions: Sequence[str],
) -> RoutingRule:
    return RoutingRule(
        domain=params.domain,
        version=params.version,
        target_type="jsonPath",
        target={"jsonPath": f"$.cookies.{cookie}"},
        act_as_proxy=act_as_proxy,
        endpoints=tuple(actions),
    )
