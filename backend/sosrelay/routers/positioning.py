"""Satellite positioning status probe.

There is no live receiver behind this; the figures are a fixed simulation
the client uses to render signal availability.
"""
from datetime import datetime, timezone
from fastapi import APIRouter

router = APIRouter()


@router.get("/status")
def galileo_sar_status():
    return {
        "status": "operational",
        "satellites": {"available": 24, "total": 30},
        "signalStrength": 0.85,
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }
