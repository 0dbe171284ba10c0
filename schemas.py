"""
Database Schemas for the Flourish flower shop

Each Pydantic model corresponds to a MongoDB collection. The collection name is the lowercase of the class name.

Example: class Product -> collection "product"

Feedback, report and cancellation details are also kept on the order document itself.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from inventory import DEFAULT_MIN_STOCK, MAX_PRODUCT_IMAGES
from order_status import OrderStatus
from pricing import DELIVERY_OPTIONS

# Core domain models

class User(BaseModel):
    name: str
    email: EmailStr
    hashed_password: str
    phone: Optional[str] = None
    address: Optional[str] = None
    is_active: bool = True
    is_admin: bool = False


class Variation(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)


class Product(BaseModel):
    name: str
    description: Optional[str] = None
    category: str
    sku: Optional[str] = None
    variations: List[Variation] = Field(..., min_length=1)
    min_price: float = 0
    max_price: float = 0
    stock: int = Field(0, ge=0)
    min_stock: int = Field(DEFAULT_MIN_STOCK, ge=0)
    status: str = "Out of Stock"
    image_urls: List[str] = Field(default_factory=list, max_length=MAX_PRODUCT_IMAGES)


class Voucher(BaseModel):
    code: str
    description: Optional[str] = None
    discount: float = Field(0, ge=0, le=100, description="Percent off the subtotal")
    free_shipping: bool = False


class OrderProduct(BaseModel):
    name: str
    price: float
    original_price: Optional[float] = None
    quantity: int = Field(1, ge=1)
    size: Optional[str] = None
    image_url: Optional[str] = None


class DeliveryDetails(BaseModel):
    option: str = "Same-Day Delivery"
    date: Optional[str] = None
    time: Optional[str] = None

    @field_validator("option")
    @classmethod
    def known_option(cls, v):
        if v not in DELIVERY_OPTIONS:
            raise ValueError(f"Unknown delivery option: {v}")
        return v


class PaymentDetails(BaseModel):
    method: str = "Cash on Delivery"
    proof_url: Optional[str] = None
    reference_number: Optional[str] = None


class DiscountDetails(BaseModel):
    new_user_discount: float = 0
    voucher_discount: float = 0
    voucher_code: Optional[str] = None


class Feedback(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    text: str = ""
    image_url: Optional[str] = None
    submitted_at: Optional[datetime] = None


class ReportCategory(str, Enum):
    COMPLAINT = "Complaint"
    DAMAGE = "Damage"
    REFUND = "Refund"


class ReportInfo(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    category: ReportCategory
    submitted_at: datetime
    admin_reply: Optional[str] = None


class Order(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    user_id: str
    customer_name: str
    customer_email: EmailStr
    customer_phone: Optional[str] = None
    delivery_address: str
    product: OrderProduct
    total_amount: float
    notes: str = ""
    status: OrderStatus = OrderStatus.PENDING
    timestamp: datetime
    delivery_details: DeliveryDetails
    payment_details: PaymentDetails
    discount_details: DiscountDetails
    cancellation_reason: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    feedback: Optional[Feedback] = None
    admin_reply: Optional[str] = None
    report_info: Optional[ReportInfo] = None
    is_read: bool = False


class Notification(BaseModel):
    """Admin-facing notice, e.g. a customer cancelling an order."""
    type: str
    message: str
    order_id: str
    timestamp: datetime
    status: str = "unread"


class Report(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    order_id: str
    category: ReportCategory
    details: str
    image_url: Optional[str] = None
    customer_name: str = "Anonymous"
    customer_email: str = "N/A"
    status: str = "new"
