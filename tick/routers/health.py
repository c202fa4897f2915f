import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from tick.routers.deps import get_store
from tick.services.store import Store

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/z")
def healthz(store: Store = Depends(get_store)):
    # Check si l'API et la base sont up
    try:
        store.ping()
    except SQLAlchemyError as e:
        logger.warning(f"Database not reachable: {e}")
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="database unavailable")
    return {"status": "ok"}
