"""BMRCalculator - Basal Metabolic Rate (TMB) calculation."""

from ..core.exceptions.domain_errors import InvalidMeasurementError
from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMRCategory, BMRFormula, BMRInput, BMRResult
from ..core.value_objects.gender import Gender


class BMRCalculator(IBMRCalculator):
    """Calculate Basal Metabolic Rate using the Harris-Benedict equation.

    The revised coefficient set (Roza & Shizgal, 1984) is the default;
    the original 1919 set can be selected via ``BMRFormula.ORIGINAL``.

    Formula (revised):
        Men:   BMR = 88.36 + 13.4 × weight(kg) + 4.8 × height(cm) - 5.7 × age
        Women: BMR = 447.6 + 9.2 × weight(kg) + 3.1 × height(cm) - 4.3 × age

    Classification uses BMR per kg of body weight (kcal/kg/day) with
    strict upper bounds, so every value maps to exactly one band:

        Men:   < 15 Very Low, < 20 Low, < 25 Normal, < 30 High, else Very High
        Women: < 13 Very Low, < 18 Low, < 23 Normal, < 28 High, else Very High
    """

    # Upper bounds of VERY_LOW, LOW, NORMAL, HIGH
    _PER_KG_BOUNDS = {
        Gender.MALE: (15.0, 20.0, 25.0, 30.0),
        Gender.FEMALE: (13.0, 18.0, 23.0, 28.0),
    }

    def __init__(self, formula: BMRFormula = BMRFormula.REVISED):
        self._formula = formula

    @property
    def formula(self) -> BMRFormula:
        return self._formula

    def calculate(self, data: BMRInput) -> float:
        """Calculate BMR from user biometric data.

        Args:
            data: Weight (kg), height (m), age and sex

        Returns:
            float: BMR in kcal/day

        Example:
            >>> data = BMRInput(weight=70.0, height=1.75, age=25, gender=Gender.MALE)
            >>> round(BMRCalculator().calculate(data), 2)
            1723.86
        """
        constant, weight_k, height_k, age_k = self._formula.coefficients(data.gender)
        height_cm = data.height * 100.0
        return constant + (weight_k * data.weight) + (height_k * height_cm) - (age_k * data.age)

    def per_kg(self, bmr: float, weight: float) -> float:
        """Get BMR per kg of body weight.

        Raises:
            InvalidMeasurementError: If weight is zero
        """
        if weight == 0:
            raise InvalidMeasurementError("weight", weight)
        return bmr / weight

    def classify(self, bmr: float, weight: float, gender: Gender) -> BMRCategory:
        """Classify BMR per kg of body weight.

        Args:
            bmr: BMR in kcal/day
            weight: Body weight in kg
            gender: Biological sex selecting the thresholds

        Returns:
            BMRCategory: Per-kg band
        """
        value = self.per_kg(bmr, weight)
        very_low, low, normal, high = self._PER_KG_BOUNDS[gender]

        if value < very_low:
            return BMRCategory.VERY_LOW
        elif value < low:
            return BMRCategory.LOW
        elif value < normal:
            return BMRCategory.NORMAL
        elif value < high:
            return BMRCategory.HIGH
        else:
            return BMRCategory.VERY_HIGH

    def evaluate(self, data: BMRInput) -> BMRResult:
        """Calculate and classify in one step."""
        bmr = self.calculate(data)
        return BMRResult(
            value=bmr,
            per_kg=self.per_kg(bmr, data.weight),
            category=self.classify(bmr, data.weight, data.gender),
        )

    def evaluation_result(self, bmr: float, weight: float, category: BMRCategory) -> str:
        """Render the BMR message.

        Args:
            bmr: BMR in kcal/day
            weight: Body weight in kg
            category: Per-kg classification

        Returns:
            str: Three-line display message

        Raises:
            InvalidMeasurementError: If weight is zero
        """
        per_kg = self.per_kg(bmr, weight)
        return (
            f"Your Basal Metabolic Rate (TMB) is {bmr:.2f} kcal/day.\n"
            f"Per kg of body weight: {per_kg:.2f} kcal/kg/day.\n"
            f"Classification: {category.label()}"
        )
