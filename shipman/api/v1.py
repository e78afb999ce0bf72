"""Versioned API surface: every module router is mounted here."""

from fastapi import APIRouter

from shipman.modules.bill_of_lading.router import router as bill_of_lading_router
from shipman.modules.charter.router import router as charter_router
from shipman.modules.demurrage.router import router as demurrage_router
from shipman.modules.dispute.router import router as dispute_router
from shipman.modules.health.router import router as health_router
from shipman.modules.laytime.router import router as laytime_router
from shipman.modules.payment.router import router as payment_router
from shipman.modules.user.router import router as user_router
from shipman.modules.vessel.router import router as vessel_router
from shipman.modules.voyage.router import cargo_router, port_router, position_router
from shipman.modules.voyage.router import router as voyage_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(health_router)
v1_router.include_router(charter_router)
v1_router.include_router(voyage_router)
v1_router.include_router(port_router)
v1_router.include_router(position_router)
v1_router.include_router(cargo_router)
v1_router.include_router(laytime_router)
v1_router.include_router(payment_router)
v1_router.include_router(dispute_router)
v1_router.include_router(bill_of_lading_router)
v1_router.include_router(demurrage_router)
v1_router.include_router(vessel_router)
v1_router.include_router(user_router)
