"""Request and response bodies of the HTTP API.

Incoming JSON is parsed into these models before it reaches the
application layer; anything that does not fit is rejected with 400.
"""

from pydantic import BaseModel, ConfigDict, Field

from storefront.application.dto import (
    CheckoutItemSpec,
    CheckoutResultDTO,
    CustomerSpec,
    ProductDTO,
)


class CustomerIn(BaseModel):
    name: str | None = None
    email: str | None = None
    address: str | None = None


class CheckoutItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(..., alias="productId")
    quantity: int


class CheckoutRequest(BaseModel):
    customer: CustomerIn
    items: list[CheckoutItemIn] = Field(..., min_length=1)

    def customer_spec(self) -> CustomerSpec:
        return CustomerSpec(
            name=self.customer.name,
            email=self.customer.email,
            address=self.customer.address,
        )

    def item_specs(self) -> list[CheckoutItemSpec]:
        return [
            CheckoutItemSpec(product_id=item.product_id, quantity=item.quantity)
            for item in self.items
        ]


class CheckoutResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_id: int = Field(..., alias="orderId")
    total: float

    @classmethod
    def from_dto(cls, dto: CheckoutResultDTO) -> "CheckoutResponse":
        return cls(order_id=dto.order_id, total=float(dto.total))


class ProductOut(BaseModel):
    id: int
    name: str
    description: str | None = None
    price: float
    image_url: str

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> "ProductOut":
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=float(dto.price),
            image_url=dto.image_url,
        )


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    db_connected: bool = Field(..., alias="dbConnected")


class ErrorResponse(BaseModel):
    error: str
