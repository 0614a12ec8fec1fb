"""Shared test fixtures."""

from __future__ import annotations

import pytest

from thetaforge.samples import DEMO_TEXT


MASS_VOLUME_TEXT = "The particle has a mass of 5.0 kg and a volume of 0.5 m3."

RADIUS_TEXT = "The circle has a radius of 12 cm."

# Four FUSION sentences → four structural anchors
ANCHOR_CHAIN_TEXT = (
    "Mass and volume one. Mass and volume two. "
    "Mass and volume three. Mass and volume four."
)

# Biological (genus) and software (class name) sentences, alternating
BIO_SENTENCE = "The genus is known."
SOFTWARE_SENTENCE = "The class name is Foo."


class ScriptedRng:
    """Stand-in random source returning a fixed sequence of draws."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self._values.pop(0)


@pytest.fixture
def demo_text() -> str:
    return DEMO_TEXT


@pytest.fixture
def mass_volume_text() -> str:
    return MASS_VOLUME_TEXT


@pytest.fixture
def radius_text() -> str:
    return RADIUS_TEXT
