from pydantic import BaseModel, ConfigDict
from typing import Optional

class QuicklinkCreate(BaseModel):
    """Créer un lien rapide"""
    name: Optional[str] = None
    url: Optional[str] = None

class QuicklinkResponse(BaseModel):
    """Lien rapide retourné"""
    id: int
    name: str
    url: str
    created_at: Optional[str]

    model_config = ConfigDict(from_attributes=True)
