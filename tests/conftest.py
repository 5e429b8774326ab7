"""Shared pytest fixtures."""

import pytest

from catalog_codepoints.config.debug import DebugFlag
from catalog_codepoints.utils.logging import set_debug_selector


@pytest.fixture(autouse=True)
def reset_debug_selector():
    """Restore the default debug selector after each test."""
    yield
    set_debug_selector(DebugFlag.FILES)


@pytest.fixture
def po_tree(tmp_path):
    """Create a translation tree root and return a catalog writer."""
    root = tmp_path / "po"
    root.mkdir()

    def write(relative: str, text: str):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    write.root = root
    return write
