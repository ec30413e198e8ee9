"""BMR value objects - Basal Metabolic Rate (TMB) input, formula and result."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .gender import Gender


@dataclass(frozen=True)
class BMRInput:
    """User biometric data for BMR calculation.

    Attributes:
        weight: Body weight in kilograms
        height: Height in meters (converted to cm by the formula)
        age: Age in years
        gender: Biological sex
    """

    weight: float
    height: float
    age: int
    gender: Gender


class BMRFormula(str, Enum):
    """Harris-Benedict coefficient set used for BMR.

    - REVISED: Roza & Shizgal revision (default)
    - ORIGINAL: Harris & Benedict 1918/1919
    """

    REVISED = "revised"
    ORIGINAL = "original"

    def coefficients(self, gender: Gender) -> Tuple[float, float, float, float]:
        """Get (constant, weight, height_cm, age) coefficients.

        Args:
            gender: Biological sex

        Returns:
            Tuple of the four linear coefficients

        Example:
            >>> BMRFormula.REVISED.coefficients(Gender.MALE)
            (88.36, 13.4, 4.8, 5.7)
        """
        table: Dict[BMRFormula, Dict[Gender, Tuple[float, float, float, float]]] = {
            BMRFormula.REVISED: {
                Gender.MALE: (88.36, 13.4, 4.8, 5.7),
                Gender.FEMALE: (447.6, 9.2, 3.1, 4.3),
            },
            BMRFormula.ORIGINAL: {
                Gender.MALE: (66.0, 13.7, 5.0, 6.8),
                Gender.FEMALE: (655.0, 9.6, 1.8, 4.7),
            },
        }
        return table[self][gender]


class BMRCategory(str, Enum):
    """BMR per kg of body weight bands, declared in ascending order."""

    VERY_LOW = "very_low"
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    VERY_HIGH = "very_high"

    def label(self) -> str:
        """Get human-readable label."""
        labels = {
            BMRCategory.VERY_LOW: "Very Low",
            BMRCategory.LOW: "Low",
            BMRCategory.NORMAL: "Normal",
            BMRCategory.HIGH: "High",
            BMRCategory.VERY_HIGH: "Very High",
        }
        return labels[self]


@dataclass(frozen=True)
class BMRResult:
    """Calculated BMR with its per-kg classification.

    Attributes:
        value: BMR in kcal/day
        per_kg: BMR per kg of body weight (kcal/kg/day)
        category: Per-kg classification band
    """

    value: float
    per_kg: float
    category: BMRCategory

    def __str__(self) -> str:
        return f"{self.value:.2f} kcal/day"
