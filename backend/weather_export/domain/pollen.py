from __future__ import annotations

from typing import Dict, List, Optional

from .air_quality import UnsupportedMetricError
from .weather import Pollen

# Level breakpoints (grains/m³) per allergen group
TREE_THRESHOLDS = [0, 1, 15, 90, 1500]
GRASS_THRESHOLDS = [0, 1, 5, 20, 200]
WEED_THRESHOLDS = [0, 1, 10, 50, 500]
MOLD_THRESHOLDS = [0, 1, 6500, 13000, 50000]

POLLEN_THRESHOLDS: Dict[str, List[int]] = {
    "tree": TREE_THRESHOLDS,
    "alder": TREE_THRESHOLDS,
    "ash": TREE_THRESHOLDS,
    "birch": TREE_THRESHOLDS,
    "chestnut": TREE_THRESHOLDS,
    "cypress": TREE_THRESHOLDS,
    "hazel": TREE_THRESHOLDS,
    "hornbeam": TREE_THRESHOLDS,
    "linden": TREE_THRESHOLDS,
    "oak": TREE_THRESHOLDS,
    "olive": TREE_THRESHOLDS,
    "plane": TREE_THRESHOLDS,
    "poplar": TREE_THRESHOLDS,
    "willow": TREE_THRESHOLDS,
    "grass": GRASS_THRESHOLDS,
    "mugwort": WEED_THRESHOLDS,
    "plantain": WEED_THRESHOLDS,
    "ragweed": WEED_THRESHOLDS,
    "sorrel": WEED_THRESHOLDS,
    "urticaceae": WEED_THRESHOLDS,
    "mold": MOLD_THRESHOLDS,
}

POLLEN_NAMES: Dict[str, str] = {
    "tree": "Trees",
    "alder": "Alder",
    "ash": "Ash",
    "birch": "Birch",
    "chestnut": "Chestnut",
    "cypress": "Cypress",
    "hazel": "Hazel",
    "hornbeam": "Hornbeam",
    "linden": "Linden",
    "oak": "Oak",
    "olive": "Olive",
    "plane": "Plane",
    "poplar": "Poplar",
    "willow": "Willow",
    "grass": "Grasses",
    "mugwort": "Mugwort",
    "plantain": "Plantain",
    "ragweed": "Ragweed",
    "sorrel": "Sorrel",
    "urticaceae": "Urticaceae",
    "mold": "Mold",
}

INDEX_NAMES = ["None", "Low", "Moderate", "High", "Very high"]
LEVEL_COLORS = [0xFFBFBFBF, 0xFF08C286, 0xFFFFC302, 0xFFFF712B, 0xFFF62A55]


def _check(component: str) -> None:
    if component not in POLLEN_THRESHOLDS:
        raise UnsupportedMetricError(f"Unsupported pollen component '{component}'")


def concentration(pollen: Pollen, component: str) -> Optional[int]:
    _check(component)
    return getattr(pollen, component)


def valid_pollens(pollen: Pollen) -> List[str]:
    return [cid for cid in POLLEN_THRESHOLDS if getattr(pollen, cid) is not None]


def is_valid(pollen: Pollen) -> bool:
    return bool(valid_pollens(pollen))


def pollen_index(pollen: Pollen, component: str) -> Optional[int]:
    value = concentration(pollen, component)
    if value is None:
        return None
    level = 0
    for position, threshold in enumerate(POLLEN_THRESHOLDS[component]):
        if value >= threshold:
            level = position
    return level


def index_name(pollen: Pollen, component: str) -> Optional[str]:
    level = pollen_index(pollen, component)
    return INDEX_NAMES[level] if level is not None else None


def color(pollen: Pollen, component: str) -> Optional[int]:
    level = pollen_index(pollen, component)
    return LEVEL_COLORS[level] if level is not None else None


def pollen_name(component: str) -> str:
    _check(component)
    return POLLEN_NAMES[component]
