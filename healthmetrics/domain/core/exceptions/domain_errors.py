"""Domain exceptions for health metrics."""


class HealthMetricsDomainError(Exception):
    """Base exception for health metrics domain errors."""

    pass


class InvalidMeasurementError(HealthMetricsDomainError):
    """Raised when a measurement would be used as a zero divisor."""

    def __init__(self, field: str, value: float):
        super().__init__(f"{field} must be non-zero and not underflow to zero, got {value}")
        self.field = field
        self.value = value


class InvalidGenderError(HealthMetricsDomainError):
    """Raised when gender input is neither M nor F."""

    def __init__(self, raw: str):
        super().__init__(f"Gender must be 'M' or 'F', got {raw!r}")
        self.raw = raw


class InvalidConfigurationError(HealthMetricsDomainError):
    """Raised when environment configuration is invalid."""

    pass
