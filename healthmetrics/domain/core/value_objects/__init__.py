"""Value objects for health metrics domain."""

from .bmi import BMICategory, BMIInput, BMIResult
from .bmr import BMRCategory, BMRFormula, BMRInput, BMRResult
from .body_fat import (
    BodyFatAgeCategory,
    BodyFatInput,
    BodyFatResult,
    BodyFatSexCategory,
)
from .gender import Gender
from .whr import WHRInput, WHRResult, WHRRisk

__all__ = [
    "Gender",
    "BMIInput",
    "BMICategory",
    "BMIResult",
    "BMRInput",
    "BMRFormula",
    "BMRCategory",
    "BMRResult",
    "BodyFatInput",
    "BodyFatSexCategory",
    "BodyFatAgeCategory",
    "BodyFatResult",
    "WHRInput",
    "WHRRisk",
    "WHRResult",
]
