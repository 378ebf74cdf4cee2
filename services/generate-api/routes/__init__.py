from routes.generate import router as generate_router
from routes.service import router as service_router

__all__ = ["generate_router", "service_router"]
