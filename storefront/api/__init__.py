# storefront/api/__init__.py
from fastapi import FastAPI

from storefront.api.routers import admin, health, orders, products, profile, reviews, users
from storefront.data.database import Database
from storefront.services.status_scheduler import Dispatcher
from storefront.utils.settings import DATABASE_URL, SQL_ECHO
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(database: Database | None = None, dispatcher: Dispatcher | None = None) -> FastAPI:
    """
    Buduje aplikacje z jawnie przekazanym uchwytem bazy.
    Bez dispatchera zmiany statusu ida do Celery.
    """
    if database is None:
        database = Database(DATABASE_URL, echo=SQL_ECHO)
    if dispatcher is None:
        from storefront.tasks.order_status import dispatch_status_change

        dispatcher = dispatch_status_change

    database.create_all()

    app = FastAPI(
        title="Storefront Order Service",
        version="1.0.0",
    )
    app.state.database = database
    app.state.dispatcher = dispatcher

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(profile.router)
    app.include_router(products.router)
    app.include_router(reviews.router)
    app.include_router(orders.router)
    app.include_router(admin.router)

    logger.info(f"Aplikacja gotowa, baza: {database.engine.url.render_as_string(hide_password=True)}")
    return app
