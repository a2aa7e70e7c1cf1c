from fastapi import APIRouter, Depends
from sqlmodel import Session

from ..database import get_db
from ..schemas.dashboard import DashboardStats
from ..storage import stats

router = APIRouter()


@router.get("/dashboard", response_model=DashboardStats)
def get_dashboard(db: Session = Depends(get_db)):
    """Task totals, completion rate, and per-status and per-employee counts."""
    return stats.get_dashboard_stats(db)
