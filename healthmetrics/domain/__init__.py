"""Domain layer: value objects, calculators and ports."""
