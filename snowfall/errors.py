class SnowfallError(Exception):
    """Base exception for snowfall domain errors."""

    pass


class InvalidConfigurationError(SnowfallError, ValueError):
    """Raised when a node id or configuration value is out of range or malformed."""

    pass


class ClockRegressionError(SnowfallError):
    """Raised when the wall clock reads earlier than the last issued timestamp."""

    def __init__(self, last_timestamp: int, current_timestamp: int):
        self.last_timestamp = last_timestamp
        self.current_timestamp = current_timestamp
        super().__init__(
            f"Clock moved backwards: refusing to generate for "
            f"{last_timestamp - current_timestamp}ms "
            f"(last={last_timestamp}, now={current_timestamp})"
        )
