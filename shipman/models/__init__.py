# Import all models so SQLAlchemy metadata is populated for Alembic autogenerate
from shipman.models.bill_of_lading import BillOfLading
from shipman.models.cargo_load import CargoLoad
from shipman.models.charter_detail import CharterDetail
from shipman.models.demurrage_record import DemurrageRecord
from shipman.models.dispute import Dispute
from shipman.models.enums import (
    DEFAULT_CURRENCY,
    AiStatus,
    CharterStatus,
    DemurrageStatus,
    DisputeStatus,
    PaymentCategory,
    PaymentStatus,
    PositionSource,
    UserRole,
    VoyageStatus,
)
from shipman.models.laytime_entry import LaytimeEntry
from shipman.models.payment import Payment
from shipman.models.ship_position import ShipPosition
from shipman.models.user import User
from shipman.models.vessel import Vessel
from shipman.models.voyage import Voyage
from shipman.models.voyage_port import VoyagePort

__all__ = [
    "DEFAULT_CURRENCY",
    "AiStatus",
    "BillOfLading",
    "CargoLoad",
    "CharterDetail",
    "CharterStatus",
    "DemurrageRecord",
    "DemurrageStatus",
    "Dispute",
    "DisputeStatus",
    "LaytimeEntry",
    "Payment",
    "PaymentCategory",
    "PaymentStatus",
    "PositionSource",
    "ShipPosition",
    "User",
    "UserRole",
    "Vessel",
    "Voyage",
    "VoyagePort",
    "VoyageStatus",
]
