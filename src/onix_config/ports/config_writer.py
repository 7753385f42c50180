from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable


# ConfigWriter port defines how rendered configuration leaves the system.
@runtime_checkable
class ConfigWriter(Protocol):
    def write_all(self, files: Mapping[str, str]) -> list[Path]:
        """Write each relative path -> text entry verbatim; return written paths."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("ConfigWriter is a port; use a concrete adapter.")
