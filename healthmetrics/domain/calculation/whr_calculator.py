"""WHRCalculator - Waist-to-Hip Ratio calculation and risk evaluation."""

from ..core.exceptions.domain_errors import InvalidMeasurementError
from ..core.ports.calculators import IWHRCalculator
from ..core.value_objects.gender import Gender
from ..core.value_objects.whr import WHRInput, WHRResult, WHRRisk


class WHRCalculator(IWHRCalculator):
    """Calculate Waist-to-Hip Ratio and cardiovascular risk.

    Risk is Higher when the ratio is strictly above 0.90 (men) or
    0.85 (women).
    """

    THRESHOLDS = {
        Gender.MALE: 0.90,
        Gender.FEMALE: 0.85,
    }

    def calculate(self, data: WHRInput) -> float:
        """Calculate waist / hip.

        Raises:
            InvalidMeasurementError: If hip circumference is zero
        """
        if data.hip_circumference == 0:
            raise InvalidMeasurementError("hip_circumference", data.hip_circumference)
        return data.waist_circumference / data.hip_circumference

    def classify(self, whr: float, gender: Gender) -> WHRRisk:
        """Classify cardiovascular risk."""
        if whr > self.THRESHOLDS[gender]:
            return WHRRisk.HIGHER
        return WHRRisk.LOWER

    def evaluate_ratio(self, data: WHRInput) -> WHRResult:
        """Calculate and classify in one step."""
        whr = self.calculate(data)
        return WHRResult(ratio=whr, risk=self.classify(whr, data.gender))

    def evaluate(self, whr: float, gender: Gender) -> str:
        """Render the risk message.

        Example:
            >>> print(WHRCalculator().evaluate(0.95, Gender.MALE))
            WHR: 0.95
            Condition: Higher risk for cardiovascular diseases (men, WHR > 0.90).
        """
        threshold = self.THRESHOLDS[gender]
        group = "men" if gender is Gender.MALE else "women"
        risk = self.classify(whr, gender)
        operator = ">" if risk is WHRRisk.HIGHER else "≤"
        return (
            f"WHR: {whr:.2f}\n"
            f"Condition: {risk.label()} for cardiovascular diseases "
            f"({group}, WHR {operator} {threshold:.2f})."
        )
