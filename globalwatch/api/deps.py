"""API dependencies"""

from globalwatch.services.age_progression import AgeProgressionClient
from globalwatch.services.wanted_service import WantedService, build_sources


def get_wanted_service() -> WantedService:
    """Fresh, request-scoped service over the configured sources"""
    return WantedService(build_sources())


def get_age_progression_client() -> AgeProgressionClient:
    return AgeProgressionClient()
