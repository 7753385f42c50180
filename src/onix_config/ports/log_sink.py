from __future__ import annotations

from typing import Protocol, runtime_checkable

from onix_config.domain.log_message import LogMessage


@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Emit one structured log record."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
