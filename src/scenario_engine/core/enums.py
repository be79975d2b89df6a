"""Shared enumerations used across the selector, connectors and app state.

All enums use the (str, Enum) mixin pattern so their values are
serializable strings, compatible with JSON output and .env configuration.
"""

from enum import Enum


class SelectionObjective(str, Enum):
    """Scoring objective used to pick the best scenario.

    SERENITY ranks by the risk-adjusted ratio (gain relative to drawdown),
    PERFORMANCE ranks by raw total gain.
    """

    SERENITY = "serenite"
    PERFORMANCE = "performance"


class RatioField(str, Enum):
    """Backend column holding the risk-adjusted ratio.

    SHARPE is the legacy column name; GAIN_DRAWDOWN is the renamed column
    exposed by later table versions. Both hold gain / max drawdown.
    """

    SHARPE = "Sharpe"
    GAIN_DRAWDOWN = "GainDD"


class ErrorKind(str, Enum):
    """User-visible failure states surfaced by the application layer."""

    TRANSPORT = "TRANSPORT"
    EMPTY_RESULT = "EMPTY_RESULT"
    INVALID_INPUT = "INVALID_INPUT"
