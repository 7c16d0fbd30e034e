from .pricing_router import router as pricing_router

__all__ = [
    "pricing_router",
]
