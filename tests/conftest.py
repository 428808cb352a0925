import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import boardgame_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from boardgame_toolkit.core.models import A4, ZERO, Component, inches  # noqa: E402


# Common test fixtures
@pytest.fixture
def a4():
    """A4 paper with 8mm margins (inner bounds 194 x 281mm)."""
    return A4


@pytest.fixture
def card_factory():
    """Factory for playing cards; poker size (2.5 x 3.5in) without bleed by default."""
    def _create(
        width: float = 2.5,
        height: float = 3.5,
        *,
        bleed=ZERO,
        name: str = "",
        with_back: bool = False,
    ) -> Component:
        card = Component.of(inches(width), inches(height), bleed=bleed, name=name)
        if with_back:
            back = Component.of(
                inches(width), inches(height), bleed=bleed, name=f"{name} back"
            )
            card = card.with_back(back)
        return card
    return _create
