"""Errors raised when build data violates the data model's type contract."""


class BuildValidationError(ValueError):
    """Malformed build input rejected at the engine boundary.

    ``field`` names the offending location (e.g. ``"base_stats.strength"``
    or ``"equipped_items.chest.base_armor"``) so callers can surface it.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
