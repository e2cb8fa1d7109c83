from globalwatch.api.routes.age_progression import router as age_progression_router
from globalwatch.api.routes.health import router as health_router
from globalwatch.api.routes.people import router as people_router

__all__ = ["age_progression_router", "health_router", "people_router"]
