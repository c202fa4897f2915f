import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from typing import List

from tick.routers.deps import get_store, get_item_id
from tick.schemas.quicklink import QuicklinkCreate, QuicklinkResponse
from tick.services.store import Store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/quicklinks", tags=["quicklinks"])


@router.get("", response_model=List[QuicklinkResponse])
def list_quicklinks(store: Store = Depends(get_store)):
    try:
        return store.list_quicklinks()
    except SQLAlchemyError as e:
        logger.error(f"Error listing quicklinks: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("", response_model=QuicklinkResponse)
def create_quicklink(link_data: QuicklinkCreate, store: Store = Depends(get_store)):
    """
    Ajoute un lien rapide.

    Les deux champs sont obligatoires, name est vérifié en premier:
    {"name": "", "url": ""} -> 400 "name is required"
    """
    if not link_data.name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="name is required")
    if not link_data.url:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="url is required")

    try:
        return store.create_quicklink(link_data.name, link_data.url)
    except SQLAlchemyError as e:
        logger.error(f"Error creating quicklink: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_quicklink(link_id: int = Depends(get_item_id), store: Store = Depends(get_store)):
    # contrairement aux tâches: id absent = succès, erreur = 500
    try:
        store.delete_quicklink(link_id)
    except SQLAlchemyError as e:
        logger.error(f"Error deleting quicklink {link_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
