from datetime import datetime
from fastapi import APIRouter

from tick.schemas.clock import ClockResponse

router = APIRouter(prefix="/api", tags=["clock"])

@router.get("/time", response_model=ClockResponse)
def server_time():
    # heure locale du serveur
    now = datetime.now()
    return {"time": now.strftime("%H:%M:%S"), "date": now.strftime("%d/%m/%Y")}
