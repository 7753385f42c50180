from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from onix_config.config.models import AdapterParams
from onix_config.domain.catalog import PipelineKind, Role
from onix_config.domain.documents import Handler
from onix_config.domain.errors import UnknownBuilderError


# Errors are explicit for fast feedback on unregistered pipeline kinds.
class UnknownHandlerError(UnknownBuilderError):
    def __init__(self, kind: object) -> None:
        super().__init__("pipeline kind", kind)


# Handler factories receive the parameter set and an optional role.
HandlerFactory = Callable[[AdapterParams, Role | None], Handler]


@dataclass
class HandlerRegistry:
    # Registry maps pipeline kinds to handler factories.
    _factories: dict[PipelineKind, HandlerFactory] = field(default_factory=dict)

    def register(self, kind: PipelineKind | str, factory: HandlerFactory) -> None:
        # Registration is explicit; later registration overrides are allowed by default.
        self._factories[PipelineKind.coerce(kind)] = factory

    def get(self, kind: PipelineKind | str) -> HandlerFactory:
        try:
            resolved = PipelineKind.coerce(kind)
        except UnknownBuilderError as exc:
            raise UnknownHandlerError(kind) from exc
        if resolved not in self._factories:
            raise UnknownHandlerError(kind)
        return self._factories[resolved]

    def kinds(self) -> list[PipelineKind]:
        return list(self._factories)
