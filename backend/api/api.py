"""
Read-only eatery API.

The catalog is loaded once in the app lifespan, before any request is served,
and handed to handlers through the `get_catalog` dependency. A catalog source
that cannot be read aborts startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse

from backend.catalog import (
    Catalog,
    get_eatery,
    list_eateries,
    load_catalog,
    search_eateries,
)
from backend.config import CatalogConfig
from models import CatalogHealth, Eatery, EateryList, EateryRequest

logger = logging.getLogger(__name__)


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def create_app(config: CatalogConfig | None = None) -> FastAPI:
    config = config or CatalogConfig.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Loading eateries from %s", config.eateries_dir)
        app.state.catalog = load_catalog(config.eateries_dir)
        yield

    app = FastAPI(title="Eatery Catalog API", lifespan=lifespan)

    @app.get("/", response_class=PlainTextResponse)
    def hello() -> str:
        return "Hello world!"

    @app.post("/echo")
    async def echo(request: Request) -> Response:
        return Response(content=await request.body(), media_type="text/plain")

    @app.get("/health", response_model=CatalogHealth)
    def health(catalog: Catalog = Depends(get_catalog)) -> CatalogHealth:
        return CatalogHealth(eateries=len(catalog), dropped=len(catalog.dropped))

    @app.get("/eateries", response_model=EateryList)
    def eateries(catalog: Catalog = Depends(get_catalog)) -> EateryList:
        return EateryList(restaurants=list_eateries(catalog))

    @app.post("/eatery", response_model=Eatery)
    def eatery(
        body: EateryRequest, catalog: Catalog = Depends(get_catalog)
    ) -> Eatery:
        found = get_eatery(catalog, body.id)
        if found is None:
            raise HTTPException(status_code=404, detail="No eatery with that id")
        return found

    @app.get("/eateries/search", response_model=EateryList)
    def search(name: str, catalog: Catalog = Depends(get_catalog)) -> EateryList:
        return EateryList(restaurants=search_eateries(catalog, name))

    return app


app = create_app()
