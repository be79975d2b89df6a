"""Domain models for the scenario engine."""

from .scenario import COLUMN_MAP, ScenarioRecord

__all__ = ["COLUMN_MAP", "ScenarioRecord"]
