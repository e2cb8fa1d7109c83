# Services package
from globalwatch.services.age_progression import AgeProgressionClient, AgeProgressionError
from globalwatch.services.wanted_service import WantedService, build_sources

__all__ = [
    "AgeProgressionClient",
    "AgeProgressionError",
    "WantedService",
    "build_sources",
]
