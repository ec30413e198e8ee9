"""End-to-end scenarios across domain, application and console layers."""

import os

import pytest
import structlog

import healthmetrics.__main__ as entry_point
from healthmetrics.application.metrics import (
    EvaluateBMIQuery,
    EvaluateBMRQuery,
    EvaluateBodyFatQuery,
    EvaluateMetricsQueryHandler,
    EvaluateWHRQuery,
)
from healthmetrics.cli.prompts import Prompter
from healthmetrics.domain.calculation import BMICalculator, BodyFatCalculator
from healthmetrics.domain.core.value_objects import (
    BMIInput,
    BMRInput,
    BodyFatAgeCategory,
    BodyFatInput,
    BodyFatSexCategory,
    Gender,
    WHRInput,
)

pytestmark = pytest.mark.integration


class TestScenarios:
    """Reference scenarios."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = EvaluateMetricsQueryHandler()

    def test_bmi_normal_weight(self):
        report = self.handler.handle_bmi(
            EvaluateBMIQuery(data=BMIInput(weight=70.0, height=1.75))
        )

        assert round(report.value, 2) == 22.86
        assert report.categories["category"] == "Normal weight"

    def test_bmr_male_normal(self):
        report = self.handler.handle_bmr(
            EvaluateBMRQuery(
                data=BMRInput(weight=70.0, height=1.75, age=25, gender=Gender.MALE)
            )
        )

        assert round(report.value, 2) == 1723.86
        assert "24.63 kcal/kg/day" in report.message
        assert report.categories["per_kg"] == "Normal"

    def test_body_fat_male_acceptable(self):
        report = self.handler.handle_body_fat(
            EvaluateBodyFatQuery(
                data=BodyFatInput(weight=80.0, height=1.80, age=35, gender=Gender.MALE)
            )
        )

        # 1.20 * 24.69 + 0.23 * 35 - 10.8 - 5.4
        assert report.value == pytest.approx(21.48, abs=1e-2)
        assert report.categories["sex"] == "Acceptable"

    def test_whr_male_on_threshold_is_lower_risk(self):
        report = self.handler.handle_whr(
            EvaluateWHRQuery(
                data=WHRInput(
                    waist_circumference=90.0,
                    hip_circumference=100.0,
                    gender=Gender.MALE,
                )
            )
        )

        assert report.value == 0.9
        assert report.categories["risk"] == "Lower risk"


class TestBMIAndBodyFat:
    """Body fat reuses the BMI calculation."""

    @pytest.mark.parametrize(
        "data",
        [
            BodyFatInput(weight=80.0, height=1.80, age=35, gender=Gender.MALE),
            BodyFatInput(weight=65.0, height=1.65, age=30, gender=Gender.FEMALE),
        ],
    )
    def test_body_fat_bmi_matches_bmi_calculator(self, data):
        bmi = BodyFatCalculator().calculate_bmi(data)

        assert bmi == BMICalculator().calculate(BMIInput(weight=data.weight, height=data.height))

    def test_adult_ranges(self):
        calculator = BodyFatCalculator()
        male = BodyFatInput(weight=80.0, height=1.80, age=35, gender=Gender.MALE)
        female = BodyFatInput(weight=65.0, height=1.65, age=30, gender=Gender.FEMALE)

        male_pct = calculator.calculate_percentage(
            calculator.calculate_bmi(male), male.age, male.gender
        )
        female_pct = calculator.calculate_percentage(
            calculator.calculate_bmi(female), female.age, female.gender
        )

        assert 10.0 < male_pct < 30.0
        assert 15.0 < female_pct < 40.0

    def test_classifications_are_valid_members(self):
        result = BodyFatCalculator().evaluate_body_fat(
            BodyFatInput(weight=70.0, height=1.75, age=28, gender=Gender.MALE)
        )

        assert result.sex_category in BodyFatSexCategory
        assert result.age_category in BodyFatAgeCategory


class TestEntryPoint:
    """Test the console entry point wiring."""

    @pytest.fixture(autouse=True)
    def _isolated(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("HEALTHMETRICS_LOG_LEVEL", "HEALTHMETRICS_BMR_FORMULA"):
            monkeypatch.delenv(name, raising=False)
        yield
        structlog.reset_defaults()
        os.environ.pop("HEALTHMETRICS_BMR_FORMULA", None)

    def _script(self, monkeypatch, input_fn, output):
        monkeypatch.setattr(entry_point, "Prompter", lambda: Prompter(input_fn, output.append))

    def test_main_runs_menu(self, monkeypatch, scripted, output):
        self._script(monkeypatch, scripted("1", "70", "1.75", "0"), output)

        assert entry_point.main() == 0
        assert "Your BMI assessment is: Normal weight (BMI 22.86)" in output

    def test_main_uses_configured_formula(self, monkeypatch, tmp_path, scripted, output):
        (tmp_path / ".env").write_text("HEALTHMETRICS_BMR_FORMULA=original\n")
        self._script(monkeypatch, scripted("2", "70", "1.75", "25", "m", "0"), output)

        assert entry_point.main() == 0
        assert any("1730.00 kcal/day" in line for line in output)

    def test_main_invalid_configuration(self, monkeypatch, capsys):
        monkeypatch.setenv("HEALTHMETRICS_LOG_LEVEL", "loud")

        assert entry_point.main() == 2
        assert "Invalid configuration" in capsys.readouterr().err
