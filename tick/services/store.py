"""
Store - accès aux données (tâches et liens rapides) sur une base SQLite.

Toutes les opérations passent par un engine limité à une seule connexion,
donc les requêtes HTTP concurrentes sont sérialisées ici.
"""

import logging
from typing import List

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from tick.core.database import Base, make_engine
from tick.models.task import Task
from tick.models.quicklink import Quicklink

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """Aucune ligne ne correspond à l'identifiant demandé."""


class Store:
    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
        )

    @classmethod
    def open(cls, path: str) -> "Store":
        return cls(make_engine(path))

    def close(self) -> None:
        self.engine.dispose()

    def migrate(self) -> None:
        # create if not exists, pas de vraies migrations
        Base.metadata.create_all(bind=self.engine)
        logger.debug("Schema ready on %s", self.engine.url)

    def ping(self) -> None:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    # ---------- tâches ----------

    def list_tasks(self, date: str) -> List[Task]:
        with self.SessionLocal() as db:
            return db.query(Task).filter(
                Task.date == date
            ).order_by(Task.created_at, Task.id).all()

    def create_task(self, title: str, date: str) -> Task:
        with self.SessionLocal() as db:
            new_task = Task(title=title, date=date, completed=False)
            db.add(new_task)
            db.commit()
            db.refresh(new_task)
            return new_task

    def toggle_task(self, task_id: int) -> bool:
        """Inverse le flag completed et retourne la NOUVELLE valeur."""
        with self.SessionLocal() as db:
            task = db.query(Task).filter(Task.id == task_id).first()
            if not task:
                raise NotFoundError(f"task {task_id} not found")

            task.completed = not task.completed
            db.commit()
            return task.completed

    def delete_task(self, task_id: int) -> None:
        with self.SessionLocal() as db:
            deleted = db.query(Task).filter(Task.id == task_id).delete()
            db.commit()
        if deleted == 0:
            raise NotFoundError(f"task {task_id} not found")

    # ---------- liens rapides ----------

    def list_quicklinks(self) -> List[Quicklink]:
        with self.SessionLocal() as db:
            return db.query(Quicklink).order_by(Quicklink.created_at, Quicklink.id).all()

    def create_quicklink(self, name: str, url: str) -> Quicklink:
        with self.SessionLocal() as db:
            link = Quicklink(name=name, url=url)
            db.add(link)
            db.commit()
            db.refresh(link)
            return link

    def delete_quicklink(self, link_id: int) -> None:
        # pas de NotFoundError ici: supprimer un lien absent n'est pas une erreur
        with self.SessionLocal() as db:
            db.query(Quicklink).filter(Quicklink.id == link_id).delete()
            db.commit()
