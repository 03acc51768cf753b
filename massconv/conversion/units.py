"""Mass units supported by the converter."""

from enum import Enum


class UnknownUnitError(Exception):
    """Raised when a unit code is not one of the supported units."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Cannot process unit '{token}' use either 'lb', 'g', 'kg', or 'metric ton'"
        )


class Unit(str, Enum):
    """A weight unit, either metric (gram, kilogram, metric ton) or pound.

    The enum value is the exact code accepted on the wire.
    """

    POUND = "lb"
    KILOGRAM = "kg"
    GRAM = "g"
    METRIC_TON = "metric ton"

    @property
    def is_metric(self) -> bool:
        return self is not Unit.POUND

    @classmethod
    def parse(cls, code: str) -> "Unit":
        """Parse a unit code.

        Matching is exact: no trimming, no case folding.

        Args:
            code: Unit code such as "kg" or "metric ton"

        Returns:
            The matching Unit

        Raises:
            UnknownUnitError: If the code is not recognized
        """
        for unit in cls:
            if unit.value == code:
                return unit
        raise UnknownUnitError(code)

    def __str__(self) -> str:
        return self.value
