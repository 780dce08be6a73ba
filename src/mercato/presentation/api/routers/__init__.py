from mercato.presentation.api.routers.auth import router as auth_router
from mercato.presentation.api.routers.products import router as products_router

__all__ = [
    "auth_router",
    "products_router",
]
