"""EvaluateMetrics queries - run calculate → classify → format per metric."""

from dataclasses import dataclass, field
from typing import Dict, Optional

import structlog

from ...domain.calculation import (
    BMICalculator,
    BMRCalculator,
    BodyFatCalculator,
    WHRCalculator,
)
from ...domain.core.value_objects import (
    BMIInput,
    BMRInput,
    BodyFatInput,
    WHRInput,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EvaluateBMIQuery:
    """Query to evaluate Body Mass Index.

    Attributes:
        data: Weight and height
    """

    data: BMIInput


@dataclass(frozen=True)
class EvaluateBMRQuery:
    """Query to evaluate Basal Metabolic Rate.

    Attributes:
        data: Weight, height, age and sex
    """

    data: BMRInput


@dataclass(frozen=True)
class EvaluateBodyFatQuery:
    """Query to evaluate body fat percentage.

    Attributes:
        data: Weight, height, age and sex
    """

    data: BodyFatInput


@dataclass(frozen=True)
class EvaluateWHRQuery:
    """Query to evaluate Waist-to-Hip Ratio.

    Attributes:
        data: Waist and hip circumference and sex
    """

    data: WHRInput


@dataclass(frozen=True)
class MetricReport:
    """Outcome of a metric evaluation.

    Attributes:
        metric: Metric identifier ('bmi', 'bmr', 'body_fat', 'whr')
        value: Primary computed value
        message: Rendered message for display
        categories: Classification labels keyed by axis
    """

    metric: str
    value: float
    message: str
    categories: Dict[str, str] = field(default_factory=dict)


class EvaluateMetricsQueryHandler:
    """Handler for metric evaluation queries.

    Stateless: calculators are injected once and reused for every query.
    """

    def __init__(
        self,
        bmi_calculator: Optional[BMICalculator] = None,
        bmr_calculator: Optional[BMRCalculator] = None,
        body_fat_calculator: Optional[BodyFatCalculator] = None,
        whr_calculator: Optional[WHRCalculator] = None,
    ):
        self._bmi = bmi_calculator or BMICalculator()
        self._bmr = bmr_calculator or BMRCalculator()
        self._body_fat = body_fat_calculator or BodyFatCalculator(self._bmi)
        self._whr = whr_calculator or WHRCalculator()

    def handle_bmi(self, query: EvaluateBMIQuery) -> MetricReport:
        """
        Handle BMI evaluation query.

        Args:
            query: EvaluateBMIQuery with weight and height

        Returns:
            MetricReport: BMI value, category and message

        Raises:
            InvalidMeasurementError: If height is zero
        """
        result = self._bmi.evaluate(query.data)
        logger.debug("BMI evaluated", bmi=result.value, category=result.category.value)

        return MetricReport(
            metric="bmi",
            value=result.value,
            categories={"category": result.category.label()},
            message=self._bmi.evaluation_result(result.value, result.category),
        )

    def handle_bmr(self, query: EvaluateBMRQuery) -> MetricReport:
        """
        Handle BMR evaluation query.

        Args:
            query: EvaluateBMRQuery with biometric data

        Returns:
            MetricReport: BMR value, per-kg category and message
        """
        data = query.data
        result = self._bmr.evaluate(data)
        logger.debug(
            "BMR evaluated",
            formula=self._bmr.formula.value,
            bmr=result.value,
            per_kg=result.per_kg,
            category=result.category.value,
        )

        return MetricReport(
            metric="bmr",
            value=result.value,
            categories={"per_kg": result.category.label()},
            message=self._bmr.evaluation_result(result.value, data.weight, result.category),
        )

    def handle_body_fat(self, query: EvaluateBodyFatQuery) -> MetricReport:
        """
        Handle body fat evaluation query.

        The message carries both the sex/age classification and the
        simplified BMI condition report.

        Args:
            query: EvaluateBodyFatQuery with biometric data

        Returns:
            MetricReport: Body fat percentage, both categories and message
        """
        data = query.data
        result = self._body_fat.evaluate_body_fat(data)
        logger.debug(
            "Body fat evaluated",
            bmi=result.bmi,
            percentage=result.percentage,
            sex_category=result.sex_category.value,
            age_category=result.age_category.value,
        )

        message = "\n".join(
            [
                self._body_fat.evaluation_result(
                    result.percentage,
                    data.gender,
                    data.age,
                    result.sex_category,
                    result.age_category,
                ),
                self._body_fat.evaluate(result.bmi, data.gender),
            ]
        )
        return MetricReport(
            metric="body_fat",
            value=result.percentage,
            categories={
                "sex": result.sex_category.label(),
                "age": result.age_category.label(),
            },
            message=message,
        )

    def handle_whr(self, query: EvaluateWHRQuery) -> MetricReport:
        """
        Handle WHR evaluation query.

        Args:
            query: EvaluateWHRQuery with circumferences and sex

        Returns:
            MetricReport: Ratio, risk and message

        Raises:
            InvalidMeasurementError: If hip circumference is zero
        """
        data = query.data
        result = self._whr.evaluate_ratio(data)
        logger.debug("WHR evaluated", whr=result.ratio, risk=result.risk.value)

        return MetricReport(
            metric="whr",
            value=result.ratio,
            categories={"risk": result.risk.label()},
            message=self._whr.evaluate(result.ratio, data.gender),
        )
