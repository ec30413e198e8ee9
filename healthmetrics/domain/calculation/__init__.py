"""Calculation services for health metrics."""

from .bmi_calculator import BMICalculator
from .bmr_calculator import BMRCalculator
from .body_fat_calculator import BodyFatCalculator
from .whr_calculator import WHRCalculator

__all__ = [
    "BMICalculator",
    "BMRCalculator",
    "BodyFatCalculator",
    "WHRCalculator",
]
