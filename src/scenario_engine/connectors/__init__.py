"""Data store connectors package.

Re-exports the BaseConnector ABC, exception hierarchy, and the scenario
store connector for convenient imports.
"""

from .base import (
    BaseConnector,
    ConnectorError,
    DataParsingError,
    TransportError,
)
from .scenario_store import ScenarioStoreConnector, format_query_number

__all__ = [
    # Base
    "BaseConnector",
    "ConnectorError",
    "DataParsingError",
    "TransportError",
    # Scenario store
    "ScenarioStoreConnector",
    "format_query_number",
]
