"""Domain vocabularies and their wire representation.

Each enumeration maps a tag (member name) to the lowercase string used in
API payloads and persisted records. The wire strings must not change.
"""

from enum import StrEnum
from typing import Final, TypeVar

from .constants import FIELD_INVALID_VALUE
from .exceptions import FieldViolation, UnknownEnumerationError, ValidationError


class BusinessType(StrEnum):
    RESTAURANT = "restaurant"
    RETAIL = "retail"
    SERVICE = "service"


class BusinessStatus(StrEnum):
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    CLOSED = "closed"


class StockStatus(StrEnum):
    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    DISCONTINUED = "discontinued"


class CartStatus(StrEnum):
    ACTIVE = "active"
    HELD = "held"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class NotificationType(StrEnum):
    ORDER_RECEIVED = "order_received"
    ORDER_STATUS_CHANGE = "order_status_change"
    LOW_STOCK = "low_stock"
    PAYMENT_RECEIVED = "payment_received"
    SYSTEM_ALERT = "system_alert"
    USER_ACTION = "user_action"


class NotificationChannel(StrEnum):
    IN_APP = "in_app"
    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


class UserRole(StrEnum):
    SUPER_ADMIN = "super_admin"
    BROKER = "broker"
    BUSINESS_OWNER = "business_owner"
    BRANCH_MANAGER = "branch_manager"
    CASHIER = "cashier"
    KITCHEN_STAFF = "kitchen_staff"
    DELIVERY_DRIVER = "delivery_driver"
    INVENTORY_MANAGER = "inventory_manager"
    FINANCE_MANAGER = "finance_manager"


class UserStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    PENDING_VERIFICATION = "pending_verification"


class OrderStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    ACCEPTED = "accepted"
    PREPARING = "preparing"
    READY = "ready"
    OUT_FOR_DELIVERY = "out_for_delivery"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class OrderType(StrEnum):
    DINE_IN = "dine_in"
    TAKEAWAY = "takeaway"
    PICKUP = "pickup"
    DELIVERY = "delivery"
    ONLINE = "online"


class PaymentMethod(StrEnum):
    CASH = "cash"
    CARD = "card"
    DIGITAL_WALLET = "digital_wallet"
    STORE_CREDIT = "store_credit"
    BANK_TRANSFER = "bank_transfer"


class TransactionStatus(StrEnum):
    PENDING = "pending"
    AUTHORIZED = "authorized"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


class TransactionType(StrEnum):
    CHARGE = "charge"
    SALE = "sale"
    REFUND = "refund"
    COMMISSION = "commission"
    PAYOUT = "payout"
    ADJUSTMENT = "adjustment"


ENUMERATIONS: Final[dict[str, type[StrEnum]]] = {
    "business_type": BusinessType,
    "business_status": BusinessStatus,
    "stock_status": StockStatus,
    "cart_status": CartStatus,
    "notification_type": NotificationType,
    "notification_channel": NotificationChannel,
    "user_role": UserRole,
    "user_status": UserStatus,
    "order_status": OrderStatus,
    "order_type": OrderType,
    "payment_method": PaymentMethod,
    "transaction_status": TransactionStatus,
    "transaction_type": TransactionType,
}

E = TypeVar("E", bound=StrEnum)


def to_wire(member: StrEnum) -> str:
    """Return the serialized form of an enumeration member."""
    return member.value


def from_wire(enum_cls: type[E], value: str) -> E:
    """Look up the member whose wire value is ``value``.

    Raises:
        ValidationError: If no member of ``enum_cls`` uses that wire value
    """
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValidationError(
            [
                FieldViolation(
                    field=enum_cls.__name__,
                    code=FIELD_INVALID_VALUE,
                    message=f"{value!r} is not one of: {allowed}",
                )
            ]
        ) from e


def describe(enum_cls: type[StrEnum]) -> list[tuple[str, str]]:
    """Return the (tag, wire value) pairs of an enumeration in declaration order."""
    return [(member.name, member.value) for member in enum_cls]


def get_enumeration(name: str) -> type[StrEnum]:
    """Get a registered enumeration by its snake_case name."""
    try:
        return ENUMERATIONS[name]
    except KeyError as e:
        raise UnknownEnumerationError(f"Unknown enumeration: {name}") from e
