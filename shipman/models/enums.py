"""Known lifecycle values for status-like columns.

The store accepts any string in these columns; these enums only name the
values the back-office uses and the defaults the schema applies.
"""

import enum


class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"


class CharterStatus(str, enum.Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class AiStatus(str, enum.Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class VoyageStatus(str, enum.Enum):
    PLANNED = "planned"
    UNDERWAY = "underway"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PositionSource(str, enum.Enum):
    MANUAL = "manual"
    AIS = "ais"
    NOON_REPORT = "noon_report"


class PaymentCategory(str, enum.Enum):
    GENERAL = "general"
    HIRE = "hire"
    FREIGHT = "freight"
    DEMURRAGE = "demurrage"
    BUNKERS = "bunkers"


class PaymentStatus(str, enum.Enum):
    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class DisputeStatus(str, enum.Enum):
    OPEN = "open"
    UNDER_REVIEW = "under_review"
    RESOLVED = "resolved"
    CLOSED = "closed"


class DemurrageStatus(str, enum.Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    SETTLED = "settled"
    DISPUTED = "disputed"


DEFAULT_CURRENCY = "USD"
