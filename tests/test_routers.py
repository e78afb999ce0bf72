"""Route wiring: every module router exposes the expected paths and methods."""

from __future__ import annotations

import pytest

from shipman.api.v1 import v1_router
from shipman.modules.bill_of_lading.router import router as bill_of_lading_router
from shipman.modules.charter.router import router as charter_router
from shipman.modules.demurrage.router import router as demurrage_router
from shipman.modules.dispute.router import router as dispute_router
from shipman.modules.laytime.router import router as laytime_router
from shipman.modules.payment.router import router as payment_router
from shipman.modules.user.router import router as user_router
from shipman.modules.vessel.router import router as vessel_router
from shipman.modules.voyage.router import cargo_router, port_router, position_router
from shipman.modules.voyage.router import router as voyage_router


def _routes(router) -> set[tuple[str, str]]:
    return {
        (method, route.path)
        for route in router.routes
        if hasattr(route, "methods")
        for method in route.methods
    }


@pytest.mark.parametrize(
    "router, expected",
    [
        (
            charter_router,
            {
                ("GET", "/charters/"),
                ("POST", "/charters/"),
                ("GET", "/charters/{charter_id}"),
                ("PUT", "/charters/{charter_id}"),
                ("DELETE", "/charters/{charter_id}"),
                ("PATCH", "/charters/{charter_id}/status"),
                ("PATCH", "/charters/{charter_id}/ai"),
                ("GET", "/charters/{charter_id}/voyages"),
                ("GET", "/charters/{charter_id}/laytime"),
                ("GET", "/charters/{charter_id}/payments"),
                ("GET", "/charters/{charter_id}/disputes"),
                ("GET", "/charters/{charter_id}/bills-of-lading"),
                ("GET", "/charters/{charter_id}/demurrage"),
            },
        ),
        (
            voyage_router,
            {
                ("POST", "/voyages/"),
                ("GET", "/voyages/{voyage_id}"),
                ("PUT", "/voyages/{voyage_id}"),
                ("DELETE", "/voyages/{voyage_id}"),
                ("PATCH", "/voyages/{voyage_id}/progress"),
                ("GET", "/voyages/{voyage_id}/ports"),
                ("GET", "/voyages/{voyage_id}/positions"),
                ("GET", "/voyages/{voyage_id}/cargo"),
                ("GET", "/voyages/{voyage_id}/laytime"),
            },
        ),
        (
            port_router,
            {
                ("POST", "/voyage-ports/"),
                ("GET", "/voyage-ports/{port_id}"),
                ("PUT", "/voyage-ports/{port_id}"),
                ("PATCH", "/voyage-ports/{port_id}/call"),
                ("DELETE", "/voyage-ports/{port_id}"),
            },
        ),
        (
            position_router,
            {
                ("POST", "/ship-positions/"),
                ("GET", "/ship-positions/{position_id}"),
                ("PUT", "/ship-positions/{position_id}"),
                ("DELETE", "/ship-positions/{position_id}"),
            },
        ),
        (
            cargo_router,
            {
                ("POST", "/cargo-loads/"),
                ("GET", "/cargo-loads/{load_id}"),
                ("PATCH", "/cargo-loads/{load_id}"),
                ("DELETE", "/cargo-loads/{load_id}"),
            },
        ),
        (
            laytime_router,
            {
                ("POST", "/laytime-entries/"),
                ("GET", "/laytime-entries/{entry_id}"),
                ("PUT", "/laytime-entries/{entry_id}"),
                ("PATCH", "/laytime-entries/{entry_id}/progress"),
                ("DELETE", "/laytime-entries/{entry_id}"),
            },
        ),
        (
            payment_router,
            {
                ("POST", "/payments/"),
                ("GET", "/payments/{payment_id}"),
                ("PUT", "/payments/{payment_id}"),
                ("PATCH", "/payments/{payment_id}/status"),
                ("DELETE", "/payments/{payment_id}"),
            },
        ),
        (
            dispute_router,
            {
                ("POST", "/disputes/"),
                ("GET", "/disputes/{dispute_id}"),
                ("PUT", "/disputes/{dispute_id}"),
                ("PATCH", "/disputes/{dispute_id}/status"),
                ("DELETE", "/disputes/{dispute_id}"),
            },
        ),
        (
            bill_of_lading_router,
            {
                ("POST", "/bills-of-lading/"),
                ("GET", "/bills-of-lading/{bill_id}"),
                ("PUT", "/bills-of-lading/{bill_id}"),
                ("DELETE", "/bills-of-lading/{bill_id}"),
            },
        ),
        (
            demurrage_router,
            {
                ("POST", "/demurrage-records/"),
                ("GET", "/demurrage-records/{record_id}"),
                ("PUT", "/demurrage-records/{record_id}"),
                ("PATCH", "/demurrage-records/{record_id}/status"),
                ("DELETE", "/demurrage-records/{record_id}"),
            },
        ),
        (
            vessel_router,
            {
                ("GET", "/vessels/"),
                ("POST", "/vessels/"),
                ("GET", "/vessels/{vessel_id}"),
                ("PUT", "/vessels/{vessel_id}"),
                ("DELETE", "/vessels/{vessel_id}"),
            },
        ),
        (user_router, {("GET", "/users/"), ("GET", "/users/{user_id}")}),
    ],
)
def test_router_exposes_expected_routes(router, expected):
    assert _routes(router) == expected


def test_v1_router_mounts_everything_under_prefix():
    paths = {route.path for route in v1_router.routes}
    assert "/api/v1/healthz" in paths
    assert "/api/v1/charters/{charter_id}/demurrage" in paths
    assert "/api/v1/cargo-loads/{load_id}" in paths
    assert all(path.startswith("/api/v1/") for path in paths)
