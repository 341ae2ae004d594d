"""Pydantic schemas for the storefront HTTP contract (camelCase on the wire)."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from storefront.modules.accounts import Account, AccountCreateInput, Address
from storefront.modules.catalog import CatalogAsset
from storefront.modules.orders import Order, OrderCreateInput, OrderItem
from storefront.modules.uploads import UploadSignature


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SignupRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    @field_validator("username")
    @classmethod
    def _strip_username(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("username must not be blank")
        return value

    def to_input(self) -> AccountCreateInput:
        return AccountCreateInput(
            username=self.username,
            password=self.password,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            address=Address(
                street=self.street,
                city=self.city,
                state=self.state,
                postal_code=self.postal_code,
                country=self.country,
            ),
        )


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    id: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, account: Account) -> "UserResponse":
        return cls(
            id=account.id,
            username=account.username,
            first_name=account.first_name,
            last_name=account.last_name,
            email=account.email,
            phone=account.phone,
            street=account.address.street,
            city=account.address.city,
            state=account.address.state,
            postal_code=account.address.postal_code,
            country=account.address.country,
            created_at=account.created_at,
        )


class AccountResponse(CamelModel):
    success: bool = True
    user: UserResponse


class AssetResponse(CamelModel):
    id: str
    public_id: str
    name: str
    cloudinary_url: str
    description: str = ""
    price: str = ""
    category: str
    context: dict[str, str] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None

    @classmethod
    def from_domain(cls, asset: CatalogAsset) -> "AssetResponse":
        return cls(
            id=asset.asset_id,
            public_id=asset.public_id,
            name=asset.name,
            cloudinary_url=asset.secure_url,
            description=asset.description,
            price=asset.price,
            category=asset.category,
            context=asset.context,
            created_at=asset.created_at,
            width=asset.width,
            height=asset.height,
            format=asset.format,
        )


class SignatureResponse(CamelModel):
    signature: str
    timestamp: int
    api_key: str
    cloud_name: str

    @classmethod
    def from_domain(cls, signed: UploadSignature) -> "SignatureResponse":
        return cls(
            signature=signed.signature,
            timestamp=signed.timestamp,
            api_key=signed.api_key,
            cloud_name=signed.cloud_name,
        )


class OrderItemSchema(CamelModel):
    name: str = ""
    price: float = 0.0
    quantity: int = Field(default=1, ge=1)
    image: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    @field_validator("price", mode="before")
    @classmethod
    def _blank_price(cls, value: Any) -> Any:
        # catalog assets without a price context carry price ""
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0.0
        return value

    def to_domain(self) -> OrderItem:
        return OrderItem(
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            image=self.image,
            extra=dict(self.model_extra or {}),
        )

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemSchema":
        return cls(name=item.name, price=item.price, quantity=item.quantity, image=item.image, **item.extra)


class PlaceOrderRequest(CamelModel):
    user_id: Optional[str] = None
    shipping_address: dict[str, Any] = Field(default_factory=dict)
    items: list[OrderItemSchema] = Field(default_factory=list)
    total: Optional[float] = None
    payment_method: Optional[str] = None
    cash_collected: Optional[bool] = None
    images: list[str] = Field(default_factory=list)

    def to_input(self) -> OrderCreateInput:
        return OrderCreateInput(
            items=[item.to_domain() for item in self.items],
            user_id=self.user_id,
            shipping_address=self.shipping_address,
            total=self.total,
            payment_method=self.payment_method,
            cash_collected=self.cash_collected,
            images=self.images,
        )


class OrderResponse(CamelModel):
    id: str
    user_id: str
    shipping_address: dict[str, Any]
    items: list[OrderItemSchema]
    total: float
    payment_method: Optional[str] = None
    cash_collected: Optional[bool] = None
    images: list[str] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_domain(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            user_id=order.user_id,
            shipping_address=order.shipping_address,
            items=[OrderItemSchema.from_domain(item) for item in order.items],
            total=order.total,
            payment_method=order.payment_method,
            cash_collected=order.cash_collected,
            images=order.images,
            created_at=order.created_at,
        )


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
