"""Material systems and synthesis parameter enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Material(str, Enum):
    """2D transition-metal dichalcogenide selectable for prediction."""

    WS2 = "ws2"
    MOS2 = "mos2"
    WSE2 = "wse2"
    MOSE2 = "mose2"

    @property
    def info(self) -> "MaterialInfo":
        return MATERIAL_CATALOGUE[self]


class SubstrateType(str, Enum):
    SAPPHIRE = "Sapphire"
    SIO2 = "SiO₂"


class PressureType(str, Enum):
    ATMOSPHERIC = "atmospheric pressure"
    LOW = "low pressure"


class SubstratePosition(str, Enum):
    TOP = "top"
    SIDE = "side"


class SaltAddition(str, Enum):
    YES = "yes"
    NO = "no"


@dataclass(frozen=True, slots=True)
class MaterialInfo:
    """Display metadata for a material system."""

    label: str
    full_name: str
    ratio: str
    metal: str
    chalcogen: str


MATERIAL_CATALOGUE: Dict[Material, MaterialInfo] = {
    Material.WS2: MaterialInfo("WS₂", "Tungsten Disulfide", "W/S", "W", "S"),
    Material.MOS2: MaterialInfo("MoS₂", "Molybdenum Disulfide", "Mo/S", "Mo", "S"),
    Material.WSE2: MaterialInfo("WSe₂", "Tungsten Diselenide", "W/Se", "W", "Se"),
    Material.MOSE2: MaterialInfo(
        "MoSe₂", "Molybdenum Diselenide", "Mo/Se", "Mo", "Se"
    ),
}

# WS2 resolves to the WSe2 model on the scoring service. Kept as observed
# until the backend contract is confirmed.
DEFAULT_MATERIAL_CODES: Dict[str, str] = {
    Material.WS2.value: "WSe2",
    Material.MOS2.value: "MoS2",
    Material.WSE2.value: "WSe2",
    Material.MOSE2.value: "MoSe2",
}

DEFAULT_MATERIAL = Material.WS2
