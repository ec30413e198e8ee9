"""MenuApp - interactive menu loop over the metric queries."""

from typing import Callable, Dict

import structlog

from ..application.metrics import (
    EvaluateBMIQuery,
    EvaluateBMRQuery,
    EvaluateBodyFatQuery,
    EvaluateMetricsQueryHandler,
    EvaluateWHRQuery,
    MetricReport,
)
from ..domain.core.exceptions.domain_errors import (
    InvalidGenderError,
    InvalidMeasurementError,
)
from ..domain.core.value_objects import BMIInput, BMRInput, BodyFatInput, WHRInput
from .prompts import Prompter

logger = structlog.get_logger(__name__)

MENU = """
=== Health Metrics Calculator ===
1 - Body Mass Index (BMI)
2 - Basal Metabolic Rate (BMR/TMB)
3 - Body Fat Percentage (PGC)
4 - Waist-to-Hip Ratio (WHR)
0 - Exit
Choose an option:"""

WEIGHT_PROMPT = "Please enter your weight in kilograms (e.g., 70.5):"
HEIGHT_PROMPT = "Please enter your height in meters (e.g., 1.75):"
AGE_PROMPT = "Please enter your age in years (e.g., 30):"
GENDER_PROMPT = "Please enter your gender (M/F):"
WAIST_PROMPT = "Please enter your waist circumference in centimeters (e.g., 80):"
HIP_PROMPT = "Please enter your hip circumference in centimeters (e.g., 100):"


class MenuApp:
    """Top-level console loop.

    Options 1-4 evaluate a metric, 0 exits. Invalid gender or a zero
    divisor aborts the current selection and returns to the menu.
    """

    def __init__(self, handler: EvaluateMetricsQueryHandler, prompter: Prompter):
        self._handler = handler
        self._prompter = prompter
        self._actions: Dict[str, Callable[[], MetricReport]] = {
            "1": self._bmi,
            "2": self._bmr,
            "3": self._body_fat,
            "4": self._whr,
        }

    def run(self) -> int:
        """Run until the user exits or input ends.

        Returns:
            int: Process exit code
        """
        while True:
            try:
                choice = self._prompter.read_line(MENU)
            except EOFError:
                logger.debug("Input closed, exiting")
                return 0

            if choice == "0":
                self._prompter.say("Goodbye!")
                return 0

            action = self._actions.get(choice)
            if action is None:
                self._prompter.say("Invalid option. Please choose 0-4.")
                continue

            try:
                report = action()
            except EOFError:
                logger.debug("Input closed, exiting")
                return 0
            except InvalidGenderError as e:
                logger.info("Invalid gender input", raw=e.raw)
                self._prompter.say("Invalid gender. Please use M or F. Returning to menu.")
                continue
            except InvalidMeasurementError as e:
                logger.info("Invalid measurement", field=e.field, value=e.value)
                self._prompter.say(f"Invalid measurement: {e}. Returning to menu.")
                continue

            self._prompter.say(report.message)

    def _bmi(self) -> MetricReport:
        weight = self._prompter.read_float(WEIGHT_PROMPT)
        height = self._prompter.read_float(HEIGHT_PROMPT)
        return self._handler.handle_bmi(
            EvaluateBMIQuery(data=BMIInput(weight=weight, height=height))
        )

    def _bmr(self) -> MetricReport:
        weight = self._prompter.read_float(WEIGHT_PROMPT)
        height = self._prompter.read_float(HEIGHT_PROMPT)
        age = self._prompter.read_age(AGE_PROMPT)
        gender = self._prompter.read_gender(GENDER_PROMPT)
        return self._handler.handle_bmr(
            EvaluateBMRQuery(
                data=BMRInput(weight=weight, height=height, age=age, gender=gender)
            )
        )

    def _body_fat(self) -> MetricReport:
        weight = self._prompter.read_float(WEIGHT_PROMPT)
        height = self._prompter.read_float(HEIGHT_PROMPT)
        age = self._prompter.read_age(AGE_PROMPT)
        gender = self._prompter.read_gender(GENDER_PROMPT)
        return self._handler.handle_body_fat(
            EvaluateBodyFatQuery(
                data=BodyFatInput(weight=weight, height=height, age=age, gender=gender)
            )
        )

    def _whr(self) -> MetricReport:
        waist = self._prompter.read_float(WAIST_PROMPT)
        hip = self._prompter.read_float(HIP_PROMPT)
        gender = self._prompter.read_gender(GENDER_PROMPT)
        return self._handler.handle_whr(
            EvaluateWHRQuery(
                data=WHRInput(
                    waist_circumference=waist,
                    hip_circumference=hip,
                    gender=gender,
                )
            )
        )
