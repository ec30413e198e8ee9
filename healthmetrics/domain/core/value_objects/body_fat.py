"""Body fat value objects - Deurenberg input, category bands and result."""

from dataclasses import dataclass
from enum import Enum

from .gender import Gender


@dataclass(frozen=True)
class BodyFatInput:
    """Biometric data for body fat estimation.

    BMI is derived from weight and height.

    Attributes:
        weight: Body weight in kilograms
        height: Height in meters
        age: Age in years
        gender: Biological sex
    """

    weight: float
    height: float
    age: int
    gender: Gender


class BodyFatSexCategory(str, Enum):
    """Body fat classification by sex, ascending."""

    ESSENTIAL = "essential"
    ATHLETE = "athlete"
    FITNESS = "fitness"
    ACCEPTABLE = "acceptable"
    OBESITY = "obesity"

    def label(self) -> str:
        """Get human-readable label."""
        labels = {
            BodyFatSexCategory.ESSENTIAL: "Essential to life",
            BodyFatSexCategory.ATHLETE: "Athlete",
            BodyFatSexCategory.FITNESS: "Fitness",
            BodyFatSexCategory.ACCEPTABLE: "Acceptable",
            BodyFatSexCategory.OBESITY: "Obesity",
        }
        return labels[self]


class BodyFatAgeCategory(str, Enum):
    """Body fat classification by sex and age bracket, ascending."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    VERY_HIGH = "very_high"

    def label(self) -> str:
        """Get human-readable label."""
        labels = {
            BodyFatAgeCategory.LOW: "Low",
            BodyFatAgeCategory.NORMAL: "Normal",
            BodyFatAgeCategory.HIGH: "High",
            BodyFatAgeCategory.VERY_HIGH: "Very High",
        }
        return labels[self]


@dataclass(frozen=True)
class BodyFatResult:
    """Estimated body fat percentage with both classifications.

    Attributes:
        bmi: BMI the estimate was derived from
        percentage: Body fat percentage (PGC)
        sex_category: Classification by sex
        age_category: Classification by sex and age bracket
    """

    bmi: float
    percentage: float
    sex_category: BodyFatSexCategory
    age_category: BodyFatAgeCategory

    def __str__(self) -> str:
        return f"{self.percentage:.2f}%"
