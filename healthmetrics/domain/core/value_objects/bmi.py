"""BMI value objects - input record, category bands and result."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class BMIInput:
    """Weight and height for BMI calculation.

    Attributes:
        weight: Body weight in kilograms
        height: Height in meters
    """

    weight: float
    height: float


class BMICategory(str, Enum):
    """BMI classification bands, declared in ascending order."""

    UNDERWEIGHT = "underweight"
    NORMAL_WEIGHT = "normal_weight"
    OVERWEIGHT = "overweight"
    OBESITY_GRADE_1 = "obesity_grade_1"
    OBESITY_GRADE_2 = "obesity_grade_2"
    OBESITY_GRADE_3 = "obesity_grade_3"

    def label(self) -> str:
        """Get human-readable label.

        Example:
            >>> BMICategory.OBESITY_GRADE_3.label()
            'Obesity Grade 3 (morbid)'
        """
        labels = {
            BMICategory.UNDERWEIGHT: "Underweight",
            BMICategory.NORMAL_WEIGHT: "Normal weight",
            BMICategory.OVERWEIGHT: "Overweight",
            BMICategory.OBESITY_GRADE_1: "Obesity Grade 1",
            BMICategory.OBESITY_GRADE_2: "Obesity Grade 2",
            BMICategory.OBESITY_GRADE_3: "Obesity Grade 3 (morbid)",
        }
        return labels[self]


@dataclass(frozen=True)
class BMIResult:
    """Calculated BMI and its category.

    Attributes:
        value: BMI in kg/m²
        category: Classification band
    """

    value: float
    category: BMICategory

    def __str__(self) -> str:
        return f"{self.value:.2f} kg/m² ({self.category.label()})"
