"""BodyFatCalculator - body fat percentage (PGC) via the Deurenberg formula."""

from typing import Dict, Optional, Tuple

from ..core.ports.calculators import IBMICalculator, IBodyFatCalculator
from ..core.value_objects.bmi import BMIInput
from ..core.value_objects.body_fat import (
    BodyFatAgeCategory,
    BodyFatInput,
    BodyFatResult,
    BodyFatSexCategory,
)
from ..core.value_objects.gender import Gender
from .bmi_calculator import BMICalculator

# (low, normal, high) per sex and age bracket. The last row of each sex
# covers 60+ and every age outside 20-59.
_AGE_RANGES: Dict[Gender, Tuple[Tuple[int, int, Tuple[float, float, float]], ...]] = {
    Gender.MALE: (
        (20, 29, (7.0, 19.0, 24.0)),
        (30, 39, (8.0, 20.0, 25.0)),
        (40, 49, (10.0, 22.0, 27.0)),
        (50, 59, (11.0, 23.0, 28.0)),
    ),
    Gender.FEMALE: (
        (20, 29, (16.0, 27.0, 32.0)),
        (30, 39, (17.0, 28.0, 33.0)),
        (40, 49, (18.0, 29.0, 34.0)),
        (50, 59, (19.0, 30.0, 35.0)),
    ),
}

_SENIOR_RANGES: Dict[Gender, Tuple[float, float, float]] = {
    Gender.MALE: (13.0, 25.0, 30.0),
    Gender.FEMALE: (20.0, 31.0, 36.0),
}

# Upper bounds of ESSENTIAL, ATHLETE, FITNESS, ACCEPTABLE
_SEX_BOUNDS: Dict[Gender, Tuple[float, float, float, float]] = {
    Gender.MALE: (6.0, 14.0, 18.0, 25.0),
    Gender.FEMALE: (14.0, 21.0, 25.0, 32.0),
}


class BodyFatCalculator(IBodyFatCalculator):
    """Estimate body fat percentage from BMI, age and sex.

    Formula (Deurenberg, 1991):
        PGC = 1.20 × BMI + 0.23 × age - 10.8 × sex - 5.4
        (sex = 1 for men, 0 for women)

    Two independent classifications are provided: by sex only, and by
    sex and age bracket (20-29, 30-39, 40-49, 50-59, 60+).
    """

    def __init__(self, bmi_calculator: Optional[IBMICalculator] = None):
        self._bmi_calculator = bmi_calculator or BMICalculator()

    def calculate_bmi(self, data: BodyFatInput) -> float:
        """Calculate BMI using the BMI calculator."""
        return self._bmi_calculator.calculate(
            BMIInput(weight=data.weight, height=data.height)
        )

    def calculate_percentage(self, bmi: float, age: int, gender: Gender) -> float:
        """Calculate body fat percentage.

        Args:
            bmi: Body Mass Index
            age: Age in years
            gender: Biological sex

        Returns:
            float: Body fat percentage

        Example:
            >>> round(BodyFatCalculator().calculate_percentage(25.0, 30, Gender.FEMALE), 2)
            31.5
        """
        return (1.20 * bmi) + (0.23 * age) - (10.8 * gender.sex_indicator()) - 5.4

    def classify_by_sex(self, percentage: float, gender: Gender) -> BodyFatSexCategory:
        """Classify body fat percentage by sex."""
        essential, athlete, fitness, acceptable = _SEX_BOUNDS[gender]

        if percentage < essential:
            return BodyFatSexCategory.ESSENTIAL
        elif percentage < athlete:
            return BodyFatSexCategory.ATHLETE
        elif percentage < fitness:
            return BodyFatSexCategory.FITNESS
        elif percentage < acceptable:
            return BodyFatSexCategory.ACCEPTABLE
        else:
            return BodyFatSexCategory.OBESITY

    def classify_by_age(
        self,
        percentage: float,
        age: int,
        gender: Gender
    ) -> BodyFatAgeCategory:
        """Classify body fat percentage by sex and age bracket.

        The low bound is exclusive while the normal and high bounds are
        inclusive: a value equal to ``low`` is Normal, a value equal to
        ``high`` is High.

        Args:
            percentage: Body fat percentage
            age: Age in years
            gender: Biological sex

        Returns:
            BodyFatAgeCategory: Age-adjusted band
        """
        low, normal, high = self.age_ranges(age, gender)

        if percentage < low:
            return BodyFatAgeCategory.LOW
        elif percentage <= normal:
            return BodyFatAgeCategory.NORMAL
        elif percentage <= high:
            return BodyFatAgeCategory.HIGH
        else:
            return BodyFatAgeCategory.VERY_HIGH

    @staticmethod
    def age_ranges(age: int, gender: Gender) -> Tuple[float, float, float]:
        """Get the (low, normal, high) thresholds for an age bracket."""
        for first, last, ranges in _AGE_RANGES[gender]:
            if first <= age <= last:
                return ranges
        return _SENIOR_RANGES[gender]

    def evaluate_body_fat(self, data: BodyFatInput) -> BodyFatResult:
        """Run the full pipeline: BMI, percentage and both classifications."""
        bmi = self.calculate_bmi(data)
        percentage = self.calculate_percentage(bmi, data.age, data.gender)
        return BodyFatResult(
            bmi=bmi,
            percentage=percentage,
            sex_category=self.classify_by_sex(percentage, data.gender),
            age_category=self.classify_by_age(percentage, data.age, data.gender),
        )

    @staticmethod
    def evaluation_result(
        percentage: float,
        gender: Gender,
        age: int,
        sex_category: BodyFatSexCategory,
        age_category: BodyFatAgeCategory,
    ) -> str:
        """Render the two-line body fat message."""
        sex = gender.label()
        return (
            f"Your Body Fat Percentage (PGC), sex [{sex}] is: "
            f"{sex_category.label()} ({percentage:.2f}%)\n"
            f"Your PGC for sex [{sex}] and age group [{age}] (WHO Standard) is: "
            f"{age_category.label()}"
        )

    @staticmethod
    def evaluate(bmi: float, gender: Gender) -> str:
        """Render a simplified BMI condition report.

        Uses the same 18.5 / 25 / 30 thresholds for both sexes; ``gender``
        is accepted for symmetry with the other reports.

        Example:
            >>> print(BodyFatCalculator.evaluate(22.0, Gender.MALE))
            BMI: 22.00
            Condition: Normal weight
        """
        if bmi < 18.5:
            condition = "Underweight"
        elif bmi < 25.0:
            condition = "Normal weight"
        elif bmi < 30.0:
            condition = "Overweight"
        else:
            condition = "Obese"
        return f"BMI: {bmi:.2f}\nCondition: {condition}"
