"""WHR value objects - Waist-to-Hip Ratio input and risk."""

from dataclasses import dataclass
from enum import Enum

from .gender import Gender


@dataclass(frozen=True)
class WHRInput:
    """Circumferences for WHR calculation.

    Attributes:
        waist_circumference: Waist in centimeters
        hip_circumference: Hip in centimeters
        gender: Biological sex
    """

    waist_circumference: float
    hip_circumference: float
    gender: Gender


class WHRRisk(str, Enum):
    """Cardiovascular risk from WHR, ascending."""

    LOWER = "lower"
    HIGHER = "higher"

    def label(self) -> str:
        """Get human-readable label."""
        return "Higher risk" if self is WHRRisk.HIGHER else "Lower risk"


@dataclass(frozen=True)
class WHRResult:
    """Calculated ratio and risk.

    Attributes:
        ratio: Waist / hip
        risk: Cardiovascular risk classification
    """

    ratio: float
    risk: WHRRisk
