"""Gender value object - biological sex used by the sex-specific formulas."""

from __future__ import annotations

from enum import Enum

from ..exceptions.domain_errors import InvalidGenderError


class Gender(str, Enum):
    """Biological sex selecting formula coefficients and thresholds.

    - MALE: 'M'
    - FEMALE: 'F'
    """

    MALE = "M"
    FEMALE = "F"

    @classmethod
    def from_input(cls, raw: str) -> Gender:
        """Parse console input ('m'/'f', case-insensitive).

        Args:
            raw: Raw user input

        Returns:
            Gender: Parsed gender

        Raises:
            InvalidGenderError: If input is not 'm' or 'f'

        Example:
            >>> Gender.from_input(" f ")
            <Gender.FEMALE: 'F'>
        """
        normalized = raw.strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            raise InvalidGenderError(raw) from None

    def sex_indicator(self) -> float:
        """Get the Deurenberg sex indicator (1.0 male, 0.0 female)."""
        return 1.0 if self is Gender.MALE else 0.0

    def label(self) -> str:
        """Get lowercase display label."""
        return "male" if self is Gender.MALE else "female"
