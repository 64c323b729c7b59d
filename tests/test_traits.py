from __future__ import annotations

import random

from facemetrics.llm.traits import find_spectra, is_valid_trait, strongest_trait, trait_image

DESCRIPTION = """## Personality
Judging - 62% - Flexible
Empathy — 85% — Thinking
Focus-40%-Exploring
"""


def test_find_spectra():
    spectra = find_spectra(DESCRIPTION)
    assert [(s.left, s.percent, s.right) for s in spectra] == [
        ("Judging", 62, "Flexible"),
        ("Empathy", 85, "Thinking"),
        ("Focus", 40, "Exploring"),
    ]


def test_strongest_trait():
    assert strongest_trait(DESCRIPTION).left == "Empathy"
    assert strongest_trait("no spectra here") is None
    assert strongest_trait("Focus - 50% - Driving\nThinking - 50% - Empathy").left == "Thinking"


def test_trait_image():
    path = trait_image("Empathy", random.Random(0))
    assert path.startswith("images/face/gg")
    assert path.endswith(".png")
    assert trait_image("Unknown") == ""
    assert is_valid_trait("judging")
    assert not is_valid_trait("Unknown")
