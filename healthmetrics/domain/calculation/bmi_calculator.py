"""BMICalculator - Body Mass Index calculation and classification."""

from ..core.exceptions.domain_errors import InvalidMeasurementError
from ..core.ports.calculators import IBMICalculator
from ..core.value_objects.bmi import BMICategory, BMIInput, BMIResult


class BMICalculator(IBMICalculator):
    """Calculate and classify Body Mass Index.

    Formula:
        BMI = weight(kg) / height(m)²

    Bands (first match wins, half-open intervals):
        < 18.5  Underweight
        < 25.0  Normal weight
        < 30.0  Overweight
        < 35.0  Obesity Grade 1
        < 40.0  Obesity Grade 2
        else    Obesity Grade 3
    """

    def calculate(self, data: BMIInput) -> float:
        """Calculate BMI.

        Args:
            data: Weight (kg) and height (m)

        Returns:
            float: BMI in kg/m²

        Raises:
            InvalidMeasurementError: If height is zero or its square
                underflows to zero

        Example:
            >>> BMICalculator().calculate(BMIInput(weight=70.0, height=1.75))
            22.857142857142858
        """
        height_squared = data.height * data.height
        if height_squared == 0:
            raise InvalidMeasurementError("height", data.height)
        return data.weight / height_squared

    def classify(self, bmi: float) -> BMICategory:
        """Classify BMI into one of six bands.

        No lower bound is checked: zero and negative values are Underweight.
        """
        if bmi < 18.5:
            return BMICategory.UNDERWEIGHT
        elif bmi < 25.0:
            return BMICategory.NORMAL_WEIGHT
        elif bmi < 30.0:
            return BMICategory.OVERWEIGHT
        elif bmi < 35.0:
            return BMICategory.OBESITY_GRADE_1
        elif bmi < 40.0:
            return BMICategory.OBESITY_GRADE_2
        else:
            return BMICategory.OBESITY_GRADE_3

    def evaluate(self, data: BMIInput) -> BMIResult:
        """Calculate and classify in one step."""
        bmi = self.calculate(data)
        return BMIResult(value=bmi, category=self.classify(bmi))

    @staticmethod
    def evaluation_result(bmi: float, category: BMICategory) -> str:
        """Render the BMI assessment message.

        Args:
            bmi: Calculated BMI
            category: Its classification

        Returns:
            str: Display message
        """
        return f"Your BMI assessment is: {category.label()} (BMI {bmi:.2f})"
