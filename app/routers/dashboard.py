import logging
from fastapi import APIRouter, Depends, HTTPException, status
from app.deps import get_storage
from app.db import Storage
from app.domain.dashboard.service import ChildNotFound, get_dashboard_summary
from app.schemas.dashboard import DashboardSummary

log = logging.getLogger("dashboard")

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("/summary/{child_id}", response_model=DashboardSummary)
async def dashboard_summary(child_id: int, storage: Storage = Depends(get_storage)):
    try:
        return get_dashboard_summary(storage, child_id)
    except ChildNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Child not found")
    except Exception:
        log.exception("Error getting dashboard data for child %s", child_id)
        raise HTTPException(status_code=500, detail="Server error")
