from __future__ import annotations

import json
from pathlib import Path

from onix_config.domain.log_message import LogMessage
from onix_config.ports.log_sink import LogSink

LOGGER_NAME = "onix-config"


class StdoutLogSink(LogSink):
    # One compact JSON object per line, tagged with the emitting tool.
    def __init__(self, logger: str = LOGGER_NAME) -> None:
        self._logger = logger

    def emit(self, message: LogMessage) -> None:
        print(_encode(message, self._logger))


class JsonlLogSink(LogSink):
    # Append-only run log for CI; usable as a context manager.
    def __init__(self, path: Path, logger: str = LOGGER_NAME) -> None:
        self._logger = logger
        path.parent.mkdir(parents=True, exist_ok=True)
        self._file = path.open("a", encoding="utf-8")

    def __enter__(self) -> JsonlLogSink:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def emit(self, message: LogMessage) -> None:
        self._file.write(_encode(message, self._logger) + "\n")
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()


def _encode(message: LogMessage, logger: str) -> str:
    # Service names and descriptor values may be non-ASCII; keep them readable.
    record = {
        "logger": logger,
        "level": message.level,
        "message": message.message,
        "timestamp": message.timestamp.isoformat().replace("+00:00", "Z"),
        "fields": message.fields,
    }
    return json.dumps(record, separators=(",", ":"), ensure_ascii=False, default=str)
