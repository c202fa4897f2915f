import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from typing import List, Optional

from tick.routers.deps import get_store, get_item_id
from tick.schemas.task import TaskCreate, TaskResponse, ToggleResponse
from tick.services.store import Store, NotFoundError
from tick.services.task_service import resolve_date

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=List[TaskResponse])
def list_tasks(
    date: Optional[str] = Query(None),
    store: Store = Depends(get_store)
):
    try:
        return store.list_tasks(resolve_date(date))
    except SQLAlchemyError as e:
        logger.error(f"Error listing tasks: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("", response_model=TaskResponse)
def create_task(
    task_data: TaskCreate,
    store: Store = Depends(get_store)
):
    if not task_data.title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="title is required")

    try:
        return store.create_task(task_data.title, resolve_date(task_data.date))
    except SQLAlchemyError as e:
        logger.error(f"Error creating task: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.patch("", response_model=ToggleResponse)
def toggle_task(
    task_id: int = Depends(get_item_id),
    store: Store = Depends(get_store)
):
    # toute erreur (pas seulement NotFound) -> 404
    try:
        completed = store.toggle_task(task_id)
    except (NotFoundError, SQLAlchemyError) as e:
        logger.info(f"Toggle failed for task {task_id}: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="task not found")

    return {"completed": completed}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: int = Depends(get_item_id),
    store: Store = Depends(get_store)
):
    try:
        store.delete_task(task_id)
    except (NotFoundError, SQLAlchemyError) as e:
        logger.info(f"Delete failed for task {task_id}: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="task not found")
