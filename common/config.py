import os
import yaml
from dataclasses import dataclass, replace
from typing import Optional, Tuple

DEFAULT_IMAGE_EXTS: Tuple[str, ...] = (".jpg", ".jpeg", ".png")


def _read(path: str):
    with open(path, "r") as f:
        return yaml.safe_load(f)


@dataclass(frozen=True)
class Paths:
    source_image: str = ""
    target_root: str = ""

@dataclass(frozen=True)
class Logging:
    level: str = "INFO"

@dataclass(frozen=True)
class Replace:
    extensions: Tuple[str, ...] = DEFAULT_IMAGE_EXTS
    preserve_metadata: bool = False

    def __post_init__(self):
        # YAML gives a list, or a bare string for a single extension
        extensions = self.extensions
        if isinstance(extensions, str):
            extensions = (extensions,)
        exts = tuple(
            (e if e.startswith(".") else f".{e}").lower()
            for e in extensions
        )
        object.__setattr__(self, "extensions", exts)


@dataclass(frozen=True)
class Config:
    paths: Paths = Paths()
    logging: Logging = Logging()
    replace: Replace = Replace()

def load_config(path: Optional[str]) -> Config:
    cfg = Config()
    if path and os.path.isfile(path):
        data = _read(path) or {}
        paths = replace(cfg.paths, **(data.get("paths", {}) or {}))
        logging = replace(cfg.logging, **(data.get("logging", {}) or {}))
        replace_cfg = replace(cfg.replace, **(data.get("replace", {}) or {}))
        cfg = replace(cfg, paths=paths, logging=logging, replace=replace_cfg)
    return cfg
