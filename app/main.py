import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.database import connect_to_database
from app.errors import register_error_handlers
from app.routes import health_router, products_router
from app.service import ProductService

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging():
    """
    Send the service's log records to stderr at LOG_LEVEL (INFO by default).
    Holds however the app is started, `python -m app.main` or `uvicorn app.main:app`.
    """
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("app").setLevel(os.getenv("LOG_LEVEL", "INFO").upper())


def create_app(database_path=None, store=None) -> FastAPI:
    """
    Build the application. Pass `store` to skip connecting to SQLite.
    """
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        product_store = store if store is not None else connect_to_database(database_path)
        app.state.product_service = ProductService(product_store)
        yield
        if store is None:
            product_store.close()

    app = FastAPI(title="Product Service API", version="1.0.0", lifespan=lifespan)
    register_error_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", 8000)))
