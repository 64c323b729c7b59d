# SPDX-License-Identifier: Apache-2.0
"""Trait spectra ("Judging - 85% - Flexible") found in a description."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from facemetrics.logging_utils import get_logger

LOGGER = get_logger(__name__)

TRAIT_PATTERN = re.compile(r"(\w+)\s*[-—]\s*(\d+)%\s*[-—]\s*(\w+)")
IMAGE_DIR = "images/face"

TRAIT_IMAGES: Dict[str, List[str]] = {
    "flexible": ["yy1.png", "yy2.png", "yy3.png"],
    "judging": ["pd1.png", "pd2.png", "pd3.png", "pd4.png", "pd5.png", "pd6.png"],
    "observing": ["kc1.png", "kc2.png", "kc3.png"],
    "empathy": ["gg1.png", "gg2.png", "gg3.png", "gg4.png", "gg5.png", "gg6.png"],
    "exploring": ["ts1.png", "ts2.png", "ts3.png"],
    "driving": ["cz1.png", "cz2.png", "cz3.png", "cz4.png", "cz5.png", "cz6.png"],
    "reflecting": ["sc1.png", "sc2.png", "sc3.png"],
    "perceiving": ["is1.png", "is2.png", "is3.png"],
    "focus": ["zz1.png", "zz2.png", "zz3.png"],
    "intuition": ["zk1.png", "zk2.png", "zk3.png"],
    "thinking": ["sg1.png", "sg2.png", "sg3.png", "sg4.png", "sg5.png", "sg6.png"],
}


@dataclass(frozen=True)
class TraitSpectrum:
    left: str
    percent: int
    right: str


def find_spectra(text: str) -> List[TraitSpectrum]:
    return [
        TraitSpectrum(left, int(percent), right)
        for left, percent, right in TRAIT_PATTERN.findall(text or "")
    ]


def strongest_trait(text: str) -> Optional[TraitSpectrum]:
    """Highest-percentage spectrum; on ties the later one wins."""
    best: Optional[TraitSpectrum] = None
    for spectrum in find_spectra(text):
        if best is None or spectrum.percent >= best.percent:
            best = spectrum
    return best


def is_valid_trait(trait: str) -> bool:
    return trait.lower() in TRAIT_IMAGES


def trait_image(trait: str, rng: random.Random | None = None) -> str:
    """Random card image path for ``trait``, or ``""`` if it has none."""
    images = TRAIT_IMAGES.get(trait.lower())
    if not images:
        LOGGER.warning("no image for trait", trait=trait)
        return ""
    return f"{IMAGE_DIR}/{(rng or random).choice(images)}"
