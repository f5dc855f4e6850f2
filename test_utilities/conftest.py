from pathlib import Path
from typing import Dict

import pytest

SOURCE_BYTES = b"\x89PNG\r\n\x1a\nnew-background"


def make_tree(root: Path, layout: Dict[str, bytes]) -> Dict[str, Path]:
    """Create files under ``root`` from a {relative_path: content} mapping."""
    out: Dict[str, Path] = {}
    for rel, content in layout.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(content)
        out[rel] = p
    return out


@pytest.fixture
def source_image(tmp_path: Path) -> Path:
    p = tmp_path / "picked" / "background.png"
    p.parent.mkdir()
    p.write_bytes(SOURCE_BYTES)
    return p


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    p = tmp_path / "Songs"
    p.mkdir()
    return p
