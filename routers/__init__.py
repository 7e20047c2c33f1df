from .agreements import router as agreements_router

__all__ = ["agreements_router"]
