from __future__ import annotations

from typing import Any, Protocol

import yaml

from onix_config.domain.errors import SerializationError


class _Document(Protocol):
    def to_dict(self) -> dict[str, Any]:
        ...


class _NoAliasDumper(yaml.SafeDumper):
    # Repeated sub-structures are written out in full; the gateway does not resolve anchors.
    def ignore_aliases(self, data: Any) -> bool:
        return True


def dump_yaml(data: Any) -> str:
    # Key order is the document's construction order, which is fixed per builder.
    try:
        return yaml.dump(
            data,
            Dumper=_NoAliasDumper,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    except yaml.YAMLError as exc:
        raise SerializationError(f"Cannot serialize document: {exc}") from exc


def dump_document(document: _Document) -> str:
    return dump_yaml(document.to_dict())


def load_yaml(text: str) -> Any:
    return yaml.safe_load(text)
