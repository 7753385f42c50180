from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from onix_config.ports.config_writer import ConfigWriter


@dataclass
class FileConfigWriter(ConfigWriter):
    # File-based ConfigWriter adapter; every entry lands under root.
    root: Path
    atomic_replace: bool = False
    encoding: str = "utf-8"

    def write_all(self, files: Mapping[str, str]) -> list[Path]:
        # Resolve every target before touching the filesystem so a bad path writes nothing.
        targets = [(self._resolve(relative), text) for relative, text in files.items()]
        self.root.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for target, text in targets:
            target.parent.mkdir(parents=True, exist_ok=True)
            self._write(target, text)
            written.append(target)
        return written

    def _resolve(self, relative: str) -> Path:
        root = self.root.resolve()
        target = (root / relative).resolve()
        if target == root or root not in target.parents:
            raise ValueError(f"Config path escapes output root: {relative}")
        return target

    def _write(self, target: Path, text: str) -> None:
        # newline="" keeps content byte-for-byte; atomic mode commits via rename.
        if not self.atomic_replace:
            with target.open("w", encoding=self.encoding, newline="") as handle:
                handle.write(text)
            return
        temp_path = target.with_suffix(target.suffix + ".tmp")
        with temp_path.open("w", encoding=self.encoding, newline="") as handle:
            handle.write(text)
        temp_path.replace(target)
