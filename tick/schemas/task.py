"""Pydantic schemas for task request/response validation."""

from pydantic import BaseModel, ConfigDict
from typing import Optional

# Schemas tâches

class TaskCreate(BaseModel):
    title: Optional[str] = None
    date: Optional[str] = None  # vide ou absent = aujourd'hui

class TaskResponse(BaseModel):
    id: int
    title: str
    completed: bool
    date: str
    created_at: Optional[str]

    model_config = ConfigDict(from_attributes=True)

class ToggleResponse(BaseModel):
    completed: bool
