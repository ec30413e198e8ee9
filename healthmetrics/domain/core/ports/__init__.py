"""Calculator ports."""

from .calculators import (
    IBMICalculator,
    IBMRCalculator,
    IBodyFatCalculator,
    IWHRCalculator,
)

__all__ = [
    "IBMICalculator",
    "IBMRCalculator",
    "IBodyFatCalculator",
    "IWHRCalculator",
]
