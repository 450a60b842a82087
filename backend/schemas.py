from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config import settings


class PaymentIntentRequest(BaseModel):
    amount: float = Field(..., description="Amount in major currency units, e.g. 19.99")
    currency: str = Field(default=settings.default_currency, description="ISO currency code")
    orderId: Optional[str] = Field(
        default=None, description="Attached to the intent as metadata"
    )


class PaymentIntentResponse(BaseModel):
    clientSecret: str


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    productId: str
    quantity: int


class ProcessOrderRequest(BaseModel):
    userId: str
    items: List[OrderItem]
    total: float
    shippingAddress: Any = None
    paymentIntentId: str


class ProcessOrderResponse(BaseModel):
    orderId: str
    status: str


class AnalyticsResponse(BaseModel):
    totalOrders: int
    totalProducts: int
    totalUsers: int
    totalRevenue: float
    recentOrders: List[Dict[str, Any]]
