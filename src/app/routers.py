"""REST API routers."""

from fastapi import FastAPI

from app.endpoints import (
    health,
    metrics,
    root,
    tokens,
    validate,
)


def include_routers(app: FastAPI) -> None:
    """Include FastAPI routers for different endpoints.

    Args:
        app: The `FastAPI` app instance.
    """
    app.include_router(root.router)

    # paths are not versioned, existing clients call them directly
    app.include_router(validate.router)
    app.include_router(tokens.router)
    app.include_router(health.router)
    app.include_router(metrics.router)
