"""Domain exceptions for health metrics."""

from .domain_errors import (
    HealthMetricsDomainError,
    InvalidConfigurationError,
    InvalidGenderError,
    InvalidMeasurementError,
)

__all__ = [
    "HealthMetricsDomainError",
    "InvalidMeasurementError",
    "InvalidGenderError",
    "InvalidConfigurationError",
]
