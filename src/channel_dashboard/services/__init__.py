from .data_service import DataService
from .fixture_data_service import FixtureDataService

__all__ = ["DataService", "FixtureDataService"]
