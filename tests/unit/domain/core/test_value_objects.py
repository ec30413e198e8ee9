"""Unit tests for health metrics value objects."""

import dataclasses

import pytest

from healthmetrics.domain.core.exceptions.domain_errors import InvalidGenderError
from healthmetrics.domain.core.value_objects import (
    BMICategory,
    BMIInput,
    BMIResult,
    BMRCategory,
    BMRFormula,
    BodyFatAgeCategory,
    BodyFatSexCategory,
    Gender,
    WHRRisk,
)


class TestGender:
    """Test Gender enum."""

    def test_from_input_lowercase(self):
        """Test lowercase input is accepted."""
        assert Gender.from_input("m") is Gender.MALE
        assert Gender.from_input("f") is Gender.FEMALE

    def test_from_input_uppercase_and_whitespace(self):
        """Test input is case-insensitive and stripped."""
        assert Gender.from_input(" F \n") is Gender.FEMALE

    def test_from_input_invalid_raises(self):
        """Test anything but m/f is rejected."""
        for raw in ("x", "", "male", "mf"):
            with pytest.raises(InvalidGenderError, match="Gender must be 'M' or 'F'"):
                Gender.from_input(raw)

    def test_invalid_gender_keeps_raw_input(self):
        """Test error carries the raw input."""
        with pytest.raises(InvalidGenderError) as exc_info:
            Gender.from_input("other")

        assert exc_info.value.raw == "other"

    def test_sex_indicator(self):
        """Test Deurenberg sex indicator."""
        assert Gender.MALE.sex_indicator() == 1.0
        assert Gender.FEMALE.sex_indicator() == 0.0

    def test_label(self):
        """Test display label."""
        assert Gender.MALE.label() == "male"
        assert Gender.FEMALE.label() == "female"


class TestBMIValueObjects:
    """Test BMI input and result."""

    def test_input_is_immutable(self):
        """Test BMIInput is frozen."""
        data = BMIInput(weight=70.0, height=1.75)

        with pytest.raises(dataclasses.FrozenInstanceError):
            data.weight = 80.0  # type: ignore[misc]

    def test_result_str(self):
        """Test BMIResult string representation."""
        result = BMIResult(value=22.857, category=BMICategory.NORMAL_WEIGHT)

        assert str(result) == "22.86 kg/m² (Normal weight)"

    def test_category_labels(self):
        """Test every BMI category has a label."""
        assert BMICategory.UNDERWEIGHT.label() == "Underweight"
        assert BMICategory.OBESITY_GRADE_1.label() == "Obesity Grade 1"
        assert BMICategory.OBESITY_GRADE_3.label() == "Obesity Grade 3 (morbid)"
        assert len({c.label() for c in BMICategory}) == 6


class TestBMRFormula:
    """Test BMRFormula coefficient sets."""

    def test_revised_coefficients(self):
        """Test revised Harris-Benedict coefficients."""
        assert BMRFormula.REVISED.coefficients(Gender.MALE) == (88.36, 13.4, 4.8, 5.7)
        assert BMRFormula.REVISED.coefficients(Gender.FEMALE) == (447.6, 9.2, 3.1, 4.3)

    def test_original_coefficients(self):
        """Test original Harris-Benedict coefficients."""
        assert BMRFormula.ORIGINAL.coefficients(Gender.MALE) == (66.0, 13.7, 5.0, 6.8)
        assert BMRFormula.ORIGINAL.coefficients(Gender.FEMALE) == (655.0, 9.6, 1.8, 4.7)

    def test_from_value(self):
        """Test formula lookup by configuration value."""
        assert BMRFormula("original") is BMRFormula.ORIGINAL


class TestCategoryLabels:
    """Test labels of the remaining category enums."""

    def test_bmr_labels(self):
        assert BMRCategory.VERY_LOW.label() == "Very Low"
        assert BMRCategory.VERY_HIGH.label() == "Very High"

    def test_body_fat_labels(self):
        assert BodyFatSexCategory.ESSENTIAL.label() == "Essential to life"
        assert BodyFatSexCategory.ACCEPTABLE.label() == "Acceptable"
        assert BodyFatAgeCategory.VERY_HIGH.label() == "Very High"

    def test_whr_labels(self):
        assert WHRRisk.HIGHER.label() == "Higher risk"
        assert WHRRisk.LOWER.label() == "Lower risk"
