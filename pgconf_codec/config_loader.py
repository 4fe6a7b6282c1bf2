from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Mapping

from .config_model import Config
from .config_parser import ParseResult, parse_lines, split_lines
from .config_writer import encode
from .grammar import CodecError, InvalidKeyError

logger = logging.getLogger(__name__)


class ConfigLoader:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> ParseResult:
        text = self.path.read_text(encoding="utf-8")
        return parse_lines(split_lines(text))

    def load(self) -> Config:
        return Config(self.read().values)

    def save(self, config: Config | Mapping[str, Any]) -> None:
        values = config.values if isinstance(config, Config) else config
        text = encode(values)
        # replace the file a symlink points at, not the link itself
        target = self.path.resolve()
        fd, temp_path = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            if target.exists():
                os.chmod(temp_path, stat.S_IMODE(target.stat().st_mode))
            os.replace(temp_path, target)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise
        logger.info("Saved %d setting(s) to %s", len(values), self.path)


def load_config(path: str | Path) -> dict[str, str]:
    return ConfigLoader(path).read().values


def save_config(path: str | Path, mapping: Mapping[str, Any]) -> None:
    ConfigLoader(path).save(mapping)


__all__ = ["CodecError", "ConfigLoader", "InvalidKeyError", "load_config", "save_config"]
