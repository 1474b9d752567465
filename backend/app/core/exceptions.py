"""
app/core/exceptions.py - Application error taxonomy.

Every error carries a human message, a machine-readable `code` and the HTTP
status the boundary should answer with. Storage errors raised by the Firestore
client are NOT wrapped here; `app.core.errors` renders them as 500.
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, *, code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.details = details or {}


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"


class InvalidInputError(AppError):
    status_code = 400
    code = "INVALID_INPUT"


class BusinessRuleError(AppError):
    status_code = 400
    code = "BUSINESS_RULE_VIOLATION"


# ---------- cart ----------
class CartNotFound(NotFoundError):
    code = "CART_NOT_FOUND"

    def __init__(self, cart_id: str):
        super().__init__(f"Cart {cart_id} not found", details={"cart_id": cart_id})


class CartItemNotFound(NotFoundError):
    code = "CART_ITEM_NOT_FOUND"

    def __init__(self, cart_id: str, product_id: str):
        super().__init__(
            f"Product {product_id} is not in cart {cart_id}",
            details={"cart_id": cart_id, "product_id": product_id},
        )


# ---------- catalog ----------
class ProductNotFound(NotFoundError):
    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} not found", details={"product_id": product_id})


class ProductUnavailable(BusinessRuleError):
    code = "PRODUCT_UNAVAILABLE"

    def __init__(self, product_id: str):
        super().__init__(f"Product {product_id} is not available", details={"product_id": product_id})


class StockInsufficient(BusinessRuleError):
    code = "STOCK_INSUFFICIENT"

    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__(
            f"Insufficient stock for product {product_id}. "
            f"Requested: {requested}, available: {available}",
            details={"product_id": product_id, "requested": requested, "available": available},
        )
