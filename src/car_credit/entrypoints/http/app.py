from fastapi import FastAPI

from car_credit.entrypoints.http.exception_handlers import register_exception_handlers
from car_credit.entrypoints.http.routes.health import router as health_router
from car_credit.entrypoints.http.routes.inventory import router as inventory_router
from car_credit.entrypoints.http.routes.loan_offers import router as loan_offers_router
from car_credit.entrypoints.http.routes.vehicles import router as vehicles_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Credit Calculator API",
        description="""
        Car loan calculator: bank offers for a selected vehicle configuration.

        ## Features
        - Browse vehicle models and configurations
        - Live inventory cards for a configuration
        - Monthly payment and upfront cost offers from partner banks

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(inventory_router, prefix="/v1")
    app.include_router(vehicles_router, prefix="/v1")
    app.include_router(loan_offers_router, prefix="/v1")

    return app


app = build_app()
