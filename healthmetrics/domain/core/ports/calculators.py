"""Calculator ports - interfaces for BMI/BMR/body fat/WHR calculations."""

from abc import ABC, abstractmethod

from ..value_objects.bmi import BMICategory, BMIInput
from ..value_objects.bmr import BMRCategory, BMRInput
from ..value_objects.body_fat import (
    BodyFatAgeCategory,
    BodyFatInput,
    BodyFatSexCategory,
)
from ..value_objects.gender import Gender
from ..value_objects.whr import WHRInput, WHRRisk


class IBMICalculator(ABC):
    """Port for Body Mass Index calculation and classification."""

    @abstractmethod
    def calculate(self, data: BMIInput) -> float:
        """Calculate BMI from weight and height.

        Args:
            data: Weight (kg) and height (m)

        Returns:
            float: BMI in kg/m²
        """
        pass

    @abstractmethod
    def classify(self, bmi: float) -> BMICategory:
        """Classify a BMI value into one of six bands."""
        pass


class IBMRCalculator(ABC):
    """Port for Basal Metabolic Rate calculation.

    Classification is expressed per kg of body weight.
    """

    @abstractmethod
    def calculate(self, data: BMRInput) -> float:
        """Calculate BMR in kcal/day.

        Args:
            data: User biometric data

        Returns:
            float: Basal metabolic rate
        """
        pass

    @abstractmethod
    def classify(self, bmr: float, weight: float, gender: Gender) -> BMRCategory:
        """Classify BMR per kg of body weight."""
        pass


class IBodyFatCalculator(ABC):
    """Port for body fat percentage (Deurenberg) calculation."""

    @abstractmethod
    def calculate_bmi(self, data: BodyFatInput) -> float:
        """Calculate the BMI the percentage is derived from."""
        pass

    @abstractmethod
    def calculate_percentage(self, bmi: float, age: int, gender: Gender) -> float:
        """Calculate body fat percentage from BMI, age and sex."""
        pass

    @abstractmethod
    def classify_by_sex(self, percentage: float, gender: Gender) -> BodyFatSexCategory:
        """Classify body fat percentage by sex only."""
        pass

    @abstractmethod
    def classify_by_age(
        self,
        percentage: float,
        age: int,
        gender: Gender
    ) -> BodyFatAgeCategory:
        """Classify body fat percentage by sex and age bracket."""
        pass


class IWHRCalculator(ABC):
    """Port for Waist-to-Hip Ratio calculation."""

    @abstractmethod
    def calculate(self, data: WHRInput) -> float:
        """Calculate waist / hip ratio."""
        pass

    @abstractmethod
    def classify(self, whr: float, gender: Gender) -> WHRRisk:
        """Classify cardiovascular risk from the ratio."""
        pass
