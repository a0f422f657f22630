"""FastAPI application exposing the catalog and checkout over HTTP."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware

from storefront.application.checkout import CheckoutHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.infrastructure.api.errors import register_exception_handlers
from storefront.infrastructure.api.schemas import (
    CheckoutRequest,
    CheckoutResponse,
    ErrorResponse,
    HealthResponse,
    ProductOut,
)
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_container(request: Request) -> Container:
    return request.app.state.container


ContainerDep = Annotated[Container, Depends(get_container)]


# ---------- Health ----------

@router.get("/health", response_model=HealthResponse)
async def health(container: ContainerDep) -> HealthResponse:
    try:
        connected = await container.db_connected()
    except Exception:
        logger.exception("Health check could not reach the store connector")
        connected = False
    return HealthResponse(db_connected=connected)


# ---------- Catalog ----------

@router.get("/products", response_model=list[ProductOut])
async def list_products(container: ContainerDep) -> list[ProductOut]:
    handler = ListProductsHandler(await container.product_repository())
    return [ProductOut.from_dto(dto) for dto in await handler.handle()]


@router.get(
    "/products/{product_id}",
    response_model=ProductOut,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_product(product_id: int, container: ContainerDep) -> ProductOut:
    handler = ShowProductHandler(await container.product_repository())
    return ProductOut.from_dto(await handler.handle(product_id))


# ---------- Checkout ----------

@router.post(
    "/checkout",
    response_model=CheckoutResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def checkout(body: CheckoutRequest, container: ContainerDep) -> CheckoutResponse:
    handler = CheckoutHandler(
        order_repo=await container.order_repository(),
        product_repo=await container.product_repository(),
    )
    dto = await handler.handle(body.customer_spec(), body.item_specs())
    return CheckoutResponse.from_dto(dto)


def create_app(
    settings: Settings | None = None,
    container: Container | None = None,
) -> FastAPI:
    """Build the API. One container, and so one store connection, per app."""
    if container is None:
        container = Container(settings or Settings.from_env())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await container.close()

    app = FastAPI(title="Storefront API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)
    app.include_router(router)
    return app
