from pydantic import BaseModel

class ClockResponse(BaseModel):
    time: str
    date: str
