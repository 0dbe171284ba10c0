import logging
import os
import re
from datetime import datetime, timedelta, timezone
from typing import Optional, List, Dict, Any, Literal

from fastapi import FastAPI, HTTPException, Depends, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel, EmailStr, Field
from pymongo.database import Database
from pymongo.errors import PyMongoError
from bson import ObjectId
from bson.errors import InvalidId
import jwt
from passlib.context import CryptContext

import database
from database import get_db, create_document, get_documents, utcnow
from schemas import (
    User as UserSchema, Product as ProductSchema, Order as OrderSchema, Variation, Voucher, OrderProduct,
    DeliveryDetails, PaymentDetails, DiscountDetails, Feedback, ReportCategory, ReportInfo, Notification, Report,
)
from pricing import compute_order_totals, format_peso, new_user_price, DELIVERY_OPTIONS
from order_status import OrderStatus, describe_order_status, order_items
from cancellation import (
    is_cancellable, resolve_cancellation_reason, cancellation_notice, cancellable_filter, CANCELLATION_REASONS,
    OTHER_REASON,
)
from inventory import price_range, stock_status, format_price_range, DEFAULT_MIN_STOCK, MAX_PRODUCT_IMAGES

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"),
                    format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# App setup
app = FastAPI(title="Flourish Flower Shop API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Security/JWT setup
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
JWT_EXPIRES_MIN = int(os.getenv("JWT_EXPIRES_MIN", "60"))
security = HTTPBearer()
password_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")

VOUCHERS = [
    Voucher(code="SALE10", description="Get 10% off your order", discount=10),
    Voucher(code="FREESHIP", description="Free shipping on all items", discount=0, free_shipping=True),
]


# Utilities
def to_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=404, detail="Not found")


def doc_to_public(doc: Dict[str, Any]) -> Dict[str, Any]:
    if not doc:
        return doc
    doc = dict(doc)
    if "_id" in doc:
        doc["id"] = str(doc.pop("_id"))
    doc.pop("hashed_password", None)
    return doc


def hash_password(password: str) -> str:
    return password_ctx.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return password_ctx.verify(password, hashed)


def create_token(user: dict) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user["_id"]),
        "email": user.get("email"),
        "is_admin": user.get("is_admin", False),
        "exp": now + timedelta(minutes=JWT_EXPIRES_MIN),
        "iat": now,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm="HS256")


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=["HS256"])
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="Invalid token")


def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(security),
                     db: Database = Depends(get_db)) -> dict:
    payload = decode_token(credentials.credentials)
    try:
        uid = ObjectId(payload.get("sub"))
    except (InvalidId, TypeError):
        raise HTTPException(status_code=401, detail="Invalid token")
    user = db["user"].find_one({"_id": uid})
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


def get_current_admin(user: dict = Depends(get_current_user)) -> dict:
    if not user.get("is_admin"):
        raise HTTPException(status_code=403, detail="Admin only")
    return user


def find_voucher(code: Optional[str]) -> Optional[Voucher]:
    if not code:
        return None
    for voucher in VOUCHERS:
        if voucher.code == code.strip().upper():
            return voucher
    raise HTTPException(status_code=400, detail="Invalid voucher code")


def is_new_user(db: Database, user: dict) -> bool:
    # First-time customers have no order history
    return db["order"].count_documents({"user_id": str(user["_id"])}) == 0


def derive_product_fields(doc: Dict[str, Any]) -> Dict[str, Any]:
    doc["min_price"], doc["max_price"] = price_range(doc.get("variations", []))
    doc["status"] = stock_status(doc.get("stock", 0), doc.get("min_stock", DEFAULT_MIN_STOCK))
    return doc


def find_user_order(db: Database, order_id: str, user: dict) -> dict:
    order = db["order"].find_one({"_id": to_object_id(order_id), "user_id": str(user["_id"])})
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


# Schemas (request/response)
class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str
    phone: Optional[str] = None
    address: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class ProductIn(BaseModel):
    name: str
    description: Optional[str] = None
    category: str
    sku: Optional[str] = None
    variations: List[Variation] = Field(..., min_length=1)
    stock: int = Field(0, ge=0)
    min_stock: int = Field(DEFAULT_MIN_STOCK, ge=0)
    image_urls: List[str] = Field(default_factory=list, max_length=MAX_PRODUCT_IMAGES)


class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    sku: Optional[str] = None
    variations: Optional[List[Variation]] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)
    min_stock: Optional[int] = Field(None, ge=0)
    image_urls: Optional[List[str]] = Field(None, max_length=MAX_PRODUCT_IMAGES)


class CartLineIn(BaseModel):
    product_id: str
    size: Optional[str] = None
    quantity: int = Field(1, ge=1)


class QuoteRequest(BaseModel):
    items: List[CartLineIn] = Field(..., min_length=1)
    delivery_option: str = "Same-Day Delivery"
    voucher_code: Optional[str] = None


class PlaceOrderRequest(BaseModel):
    item: CartLineIn
    delivery_details: DeliveryDetails = Field(default_factory=DeliveryDetails)
    payment_details: PaymentDetails = Field(default_factory=PaymentDetails)
    voucher_code: Optional[str] = None
    notes: str = ""
    delivery_address: Optional[str] = None
    customer_phone: Optional[str] = None


class CancelRequest(BaseModel):
    reason: str
    custom_reason: Optional[str] = None


class FeedbackRequest(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    text: str = ""
    image_url: Optional[str] = None


class ReportRequest(BaseModel):
    category: ReportCategory
    details: str
    image_url: Optional[str] = None


class AdminReplyRequest(BaseModel):
    message: str
    target: Literal["feedback", "report"] = "feedback"


def build_line(db: Database, line: CartLineIn, new_user: bool) -> OrderProduct:
    product = db["product"].find_one({"_id": to_object_id(line.product_id)})
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    variations = product.get("variations") or []
    if line.size:
        variation = next((v for v in variations if v.get("name") == line.size), None)
        if variation is None:
            raise HTTPException(status_code=400, detail=f"Unknown size: {line.size}")
    elif len(variations) == 1:
        variation = variations[0]
    else:
        raise HTTPException(status_code=400, detail="Please select a size before placing your order.")
    original_price = variation.get("price", 0)
    return OrderProduct(
        name=product.get("name"),
        price=new_user_price(original_price) if new_user else original_price,
        original_price=original_price,
        quantity=line.quantity,
        size=variation.get("name") if len(variations) > 1 else None,
        image_url=(product.get("image_urls") or [None])[0],
    )


def tracking_view(order: dict) -> Dict[str, Any]:
    message = describe_order_status(order.get("status"), order_items(order))
    view = doc_to_public(order)
    view["status_message"] = message.model_dump()
    view["cancellable"] = is_cancellable(order, utcnow())
    view["formatted_total"] = format_peso(order.get("total_amount"))
    return view


# Health and helpers
@app.get("/")
def root():
    return {"message": "Flourish Flower Shop API running"}


@app.get("/test")
def test_database():
    response = {
        "backend": "✅ Running",
        "database": "❌ Not Available",
        "database_url": "✅ Set" if os.getenv("DATABASE_URL") else "❌ Not Set",
        "database_name": "✅ Set" if os.getenv("DATABASE_NAME") else "❌ Not Set",
        "connection_status": "Not Connected",
        "collections": []
    }
    try:
        if database.db is not None:
            response["database"] = "✅ Connected & Working"
            response["connection_status"] = "Connected"
            response["collections"] = database.db.list_collection_names()[:10]
    except PyMongoError as e:
        response["database"] = f"⚠️ Connected but error: {str(e)[:80]}"
    return response


# Auth
@app.post("/auth/register")
def register(payload: RegisterRequest, db: Database = Depends(get_db)):
    if db["user"].find_one({"email": payload.email}):
        raise HTTPException(status_code=400, detail="Email already registered")
    user_doc = UserSchema(
        name=payload.name,
        email=payload.email,
        hashed_password=hash_password(payload.password),
        phone=payload.phone,
        address=payload.address,
    )
    inserted_id = create_document(db, "user", user_doc)
    user = db["user"].find_one({"_id": ObjectId(inserted_id)})
    token = create_token(user)
    return {"token": token, "user": {"id": inserted_id, "name": user["name"], "email": user["email"], "is_admin": user.get("is_admin", False)}}


@app.post("/auth/login")
def login(payload: LoginRequest, db: Database = Depends(get_db)):
    user = db["user"].find_one({"email": payload.email})
    if not user or not verify_password(payload.password, user.get("hashed_password", "")):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = create_token(user)
    return {"token": token, "user": {"id": str(user["_id"]), "name": user["name"], "email": user["email"], "is_admin": user.get("is_admin", False)}}


@app.get("/me")
def me(current_user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    profile = doc_to_public(current_user)
    profile["is_new_user"] = is_new_user(db, current_user)
    return profile


# Products
@app.get("/products")
def list_products(q: Optional[str] = None, category: Optional[str] = None, sort: Optional[str] = None,
                  page: int = Query(1, ge=1), page_size: int = Query(12, ge=1, le=100),
                  db: Database = Depends(get_db)):
    filt: Dict[str, Any] = {}
    if q:
        pattern = re.escape(q)
        filt["$or"] = [
            {"name": {"$regex": pattern, "$options": "i"}},
            {"sku": {"$regex": pattern, "$options": "i"}},
        ]
    if category:
        filt["category"] = category

    sort_map = {
        "price_asc": [("min_price", 1)],
        "price_desc": [("max_price", -1)],
        "newest": [("created_at", -1)],
    }
    total = db["product"].count_documents(filt)
    items = get_documents(db, "product", filt, sort=sort_map.get(sort),
                          skip=(page - 1) * page_size, limit=page_size)

    out = []
    for p in items:
        p = doc_to_public(p)
        p["price_label"] = format_price_range(p.get("min_price"), p.get("max_price"))
        out.append(p)
    return {"items": out, "page": page, "page_size": page_size, "total": total}


@app.get("/products/{product_id}")
def get_product(product_id: str, db: Database = Depends(get_db)):
    p = db["product"].find_one({"_id": to_object_id(product_id)})
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")
    p = doc_to_public(p)
    p["price_label"] = format_price_range(p.get("min_price"), p.get("max_price"))
    return p


@app.post("/products")
def create_product(payload: ProductIn, user: dict = Depends(get_current_admin), db: Database = Depends(get_db)):
    doc = derive_product_fields(payload.model_dump())
    product = ProductSchema(**doc)
    inserted = create_document(db, "product", product)
    logger.info("Product %s created by %s", inserted, user.get("email"))
    return {"id": inserted, "min_price": product.min_price, "max_price": product.max_price, "status": product.status}


@app.put("/products/{product_id}")
def update_product(product_id: str, payload: ProductUpdate, user: dict = Depends(get_current_admin),
                   db: Database = Depends(get_db)):
    oid = to_object_id(product_id)
    existing = db["product"].find_one({"_id": oid})
    if not existing:
        raise HTTPException(status_code=404, detail="Product not found")
    update = {k: v for k, v in payload.model_dump().items() if v is not None}
    merged = derive_product_fields({**existing, **update})
    for key in ("min_price", "max_price", "status"):
        update[key] = merged[key]
    update["updated_at"] = utcnow()
    db["product"].update_one({"_id": oid}, {"$set": update})
    return {"id": product_id, "updated": True, "status": update["status"]}


@app.delete("/products/{product_id}")
def delete_product(product_id: str, user: dict = Depends(get_current_admin), db: Database = Depends(get_db)):
    res = db["product"].delete_one({"_id": to_object_id(product_id)})
    if res.deleted_count == 0:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"id": product_id, "deleted": True}


# Vouchers
@app.get("/vouchers")
def list_vouchers():
    return [v.model_dump() for v in VOUCHERS]


# Checkout & Orders
@app.post("/checkout/quote")
def checkout_quote(payload: QuoteRequest, user: dict = Depends(get_current_user),
                   db: Database = Depends(get_db)):
    if payload.delivery_option not in DELIVERY_OPTIONS:
        raise HTTPException(status_code=400, detail=f"Unknown delivery option: {payload.delivery_option}")
    new_user = is_new_user(db, user)
    voucher = find_voucher(payload.voucher_code)
    lines = [build_line(db, line, new_user) for line in payload.items]
    totals = compute_order_totals(lines, payload.delivery_option, new_user, voucher)
    return {
        "is_new_user": new_user,
        "items": [line.model_dump() for line in lines],
        "totals": totals.model_dump(),
        "display": {k: format_peso(v) for k, v in totals.model_dump().items()},
    }


@app.post("/orders")
def place_order(payload: PlaceOrderRequest, user: dict = Depends(get_current_user),
                db: Database = Depends(get_db)):
    address = payload.delivery_address or user.get("address")
    if not address:
        raise HTTPException(status_code=400, detail="Please provide a complete shipping address.")
    if payload.payment_details.method == "GCash" and not payload.payment_details.proof_url:
        raise HTTPException(status_code=400, detail="Please upload a screenshot of your GCash payment.")

    new_user = is_new_user(db, user)
    voucher = find_voucher(payload.voucher_code)
    line = build_line(db, payload.item, new_user)
    totals = compute_order_totals([line], payload.delivery_details.option, new_user, voucher)

    order = OrderSchema(
        user_id=str(user["_id"]),
        customer_name=user.get("name", ""),
        customer_email=user["email"],
        customer_phone=payload.customer_phone or user.get("phone"),
        delivery_address=address,
        product=line,
        total_amount=totals.total,
        notes=payload.notes,
        status=OrderStatus.PENDING,
        timestamp=utcnow(),
        delivery_details=payload.delivery_details,
        payment_details=payload.payment_details,
        discount_details=DiscountDetails(
            new_user_discount=totals.new_user_discount,
            voucher_discount=totals.voucher_discount,
            voucher_code=voucher.code if voucher else None,
        ),
    )
    order_id = create_document(db, "order", order)
    logger.info("Order %s placed by user %s, total %s", order_id, order.user_id, format_peso(totals.total))
    return {"order_id": order_id, "status": order.status, "total": totals.total,
            "formatted_total": format_peso(totals.total), "totals": totals.model_dump()}


@app.get("/orders")
def list_orders(user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    orders = get_documents(db, "order", {"user_id": str(user["_id"])}, sort=[("timestamp", -1)])
    return {"items": [tracking_view(o) for o in orders]}


@app.get("/orders/{order_id}")
def track_order(order_id: str, user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    return tracking_view(find_user_order(db, order_id, user))


@app.get("/notifications")
def list_notifications(user: dict = Depends(get_current_user), db: Database = Depends(get_db)):
    filt = {"user_id": str(user["_id"]), "status": {"$in": [s.value for s in OrderStatus]}}
    notifications = []
    for order in get_documents(db, "order", filt, sort=[("timestamp", -1)]):
        message = describe_order_status(order.get("status"), order_items(order))
        notifications.append({
            "id": str(order["_id"]),
            "title": message.title,
            "message": message.body,
            "icon": message.icon,
            "status": order.get("status"),
            "status_color": message.color,
            "timestamp": order.get("timestamp"),
            "is_read": order.get("is_read", False),
        })
    return {"items": notifications, "count": len(notifications)}


@app.get("/orders/cancellation/reasons")
def cancellation_reasons():
    return {"reasons": CANCELLATION_REASONS + [OTHER_REASON]}


@app.post("/orders/{order_id}/cancel")
def cancel_order(order_id: str, payload: CancelRequest, user: dict = Depends(get_current_user),
                 db: Database = Depends(get_db)):
    order = find_user_order(db, order_id, user)
    now = utcnow()
    if not is_cancellable(order, now):
        raise HTTPException(status_code=409, detail="This order can no longer be cancelled")
    try:
        reason = resolve_cancellation_reason(payload.reason, payload.custom_reason)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # Re-check the gate in the write so a concurrent status change wins
    try:
        res = db["order"].update_one({"_id": order["_id"], **cancellable_filter(now)}, {"$set": {
            "status": OrderStatus.CANCELLED.value,
            "cancellation_reason": reason,
            "cancelled_at": now,
            "updated_at": now,
        }})
    except PyMongoError:
        logger.exception("Cancelling order %s failed", order_id)
        raise HTTPException(status_code=500, detail="Could not cancel the order. Please try again.")
    if res.matched_count == 0:
        raise HTTPException(status_code=409, detail="This order can no longer be cancelled")

    try:
        notice = Notification(type="ORDER_CANCELLED", message=cancellation_notice(order_id, reason),
                              order_id=order_id, timestamp=now)
        create_document(db, "notification", notice)
    except PyMongoError:
        logger.exception("Order %s cancelled but the admin notification was not stored", order_id)
    logger.info("Order %s cancelled: %s", order_id, reason)
    return {"id": order_id, "status": OrderStatus.CANCELLED.value, "cancellation_reason": reason}


@app.post("/orders/{order_id}/feedback")
def submit_feedback(order_id: str, payload: FeedbackRequest, user: dict = Depends(get_current_user),
                    db: Database = Depends(get_db)):
    order = find_user_order(db, order_id, user)
    if order.get("status") != OrderStatus.DELIVERED.value:
        raise HTTPException(status_code=409, detail="Feedback is only accepted for delivered orders")
    if order.get("feedback"):
        raise HTTPException(status_code=409, detail="Feedback already submitted")
    feedback = Feedback(rating=payload.rating, text=payload.text.strip(), image_url=payload.image_url,
                        submitted_at=utcnow())
    res = db["order"].update_one(
        {"_id": order["_id"], "status": OrderStatus.DELIVERED.value, "feedback": None},
        {"$set": {"feedback": feedback.model_dump()}},
    )
    if res.matched_count == 0:
        raise HTTPException(status_code=409, detail="Feedback already submitted")
    product = order.get("product") or {}
    create_document(db, "feedback", {
        **feedback.model_dump(),
        "order_id": order_id,
        "customer_name": order.get("customer_name") or "Anonymous",
        "customer_email": order.get("customer_email") or "",
        "product_name": product.get("name") or "N/A",
        "product_image_url": product.get("image_url") or "",
        "status": "new",
        "admin_reply": None,
    })
    return {"id": order_id, "feedback": feedback.model_dump()}


REPORTABLE_STATUSES = [OrderStatus.SHIPPED.value, OrderStatus.DELIVERED.value]


@app.post("/orders/{order_id}/report")
def report_issue(order_id: str, payload: ReportRequest, user: dict = Depends(get_current_user),
                 db: Database = Depends(get_db)):
    order = find_user_order(db, order_id, user)
    if order.get("status") not in REPORTABLE_STATUSES:
        raise HTTPException(status_code=409, detail="Issues can only be reported for shipped or delivered orders")
    if order.get("report_info"):
        raise HTTPException(status_code=409, detail="A report was already submitted for this order")
    details = payload.details.strip()
    if not details:
        raise HTTPException(status_code=400, detail="Please describe the issue in detail.")
    info = ReportInfo(category=payload.category, submitted_at=utcnow())
    res = db["order"].update_one(
        {"_id": order["_id"], "status": {"$in": REPORTABLE_STATUSES}, "report_info": None},
        {"$set": {"report_info": info.model_dump()}},
    )
    if res.matched_count == 0:
        raise HTTPException(status_code=409, detail="A report was already submitted for this order")
    report = Report(
        order_id=order_id,
        category=payload.category,
        details=details,
        image_url=payload.image_url,
        customer_name=order.get("customer_name") or "Anonymous",
        customer_email=order.get("customer_email") or "N/A",
    )
    create_document(db, "report", report)
    return {"id": order_id, "report_info": info.model_dump()}


# Admin
@app.get("/admin/notifications")
def admin_notifications(user: dict = Depends(get_current_admin), db: Database = Depends(get_db)):
    items = get_documents(db, "notification", sort=[("timestamp", -1)])
    return {"items": [doc_to_public(n) for n in items]}


@app.get("/admin/orders")
def admin_orders(unread: bool = False, user: dict = Depends(get_current_admin), db: Database = Depends(get_db)):
    filt = {"is_read": False} if unread else {}
    items = get_documents(db, "order", filt, sort=[("timestamp", -1)])
    return {"items": [tracking_view(o) for o in items]}


@app.post("/admin/orders/{order_id}/read")
def mark_order_read(order_id: str, user: dict = Depends(get_current_admin), db: Database = Depends(get_db)):
    res = db["order"].update_one({"_id": to_object_id(order_id)}, {"$set": {"is_read": True}})
    if res.matched_count == 0:
        raise HTTPException(status_code=404, detail="Order not found")
    return {"id": order_id, "is_read": True}


@app.post("/admin/orders/{order_id}/reply")
def reply_to_customer(order_id: str, payload: AdminReplyRequest, user: dict = Depends(get_current_admin),
                      db: Database = Depends(get_db)):
    message = payload.message.strip()
    if not message:
        raise HTTPException(status_code=400, detail="Reply cannot be empty")
    order = db["order"].find_one({"_id": to_object_id(order_id)})
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    # Feedback replies land on the order itself, report replies on its report_info
    if payload.target == "feedback":
        if not order.get("feedback"):
            raise HTTPException(status_code=409, detail="This order has no feedback to reply to")
        order_update = {"admin_reply": message}
    else:
        if not order.get("report_info"):
            raise HTTPException(status_code=409, detail="This order has no report to reply to")
        order_update = {"report_info.admin_reply": message}

    now = utcnow()
    db[payload.target].update_many({"order_id": order_id}, {"$set": {
        "admin_reply": message,
        "replied_at": now,
        "status": "replied",
        "updated_at": now,
    }})
    db["order"].update_one({"_id": order["_id"]}, {"$set": order_update})
    logger.info("Admin %s replied to %s on order %s", user.get("email"), payload.target, order_id)
    return {"id": order_id, "target": payload.target, "admin_reply": message}


SAMPLE_PRODUCTS = [
    {
        "name": "Classic Red Roses",
        "description": "A dozen long-stemmed red roses wrapped in kraft paper.",
        "category": "Bouquets",
        "sku": "BQ-ROSE-RED",
        "variations": [{"name": "Small", "price": 500.0}, {"name": "Large", "price": 950.0}],
        "stock": 40,
        "image_urls": ["https://images.unsplash.com/photo-1518895949257-7621c3c786d7?q=80&w=1200&auto=format&fit=crop"],
    },
    {
        "name": "Sunflower Sunshine",
        "description": "Bright sunflowers with eucalyptus accents.",
        "category": "Bouquets",
        "sku": "BQ-SUN",
        "variations": [{"name": "Default", "price": 650.0}],
        "stock": 8,
        "image_urls": ["https://images.unsplash.com/photo-1470509037663-253afd7f0f51?q=80&w=1200&auto=format&fit=crop"],
    },
    {
        "name": "Pastel Tulip Box",
        "description": "Mixed pastel tulips arranged in a keepsake box.",
        "category": "Flower Boxes",
        "sku": "BX-TULIP",
        "variations": [{"name": "Regular", "price": 1200.0}, {"name": "Deluxe", "price": 1800.0}],
        "stock": 0,
        "image_urls": ["https://images.unsplash.com/photo-1520763185298-1b434c919102?q=80&w=1200&auto=format&fit=crop"],
    },
]


@app.post("/admin/seed")
def seed_products(user: dict = Depends(get_current_admin), db: Database = Depends(get_db)):
    if db["product"].count_documents({}) > 0:
        return {"seeded": False, "message": "Products already exist"}
    for sample in SAMPLE_PRODUCTS:
        create_document(db, "product", ProductSchema(**derive_product_fields(dict(sample))))
    return {"seeded": True, "count": len(SAMPLE_PRODUCTS)}


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    uvicorn.run(app, host="0.0.0.0", port=port)
