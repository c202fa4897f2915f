import re
from typing import Optional

from fastapi import HTTPException, Query, Request, status

from tick.services.store import Store

_ID_RE = re.compile(r"[+-]?[0-9]+")
# entier signé 64 bits, comme une colonne INTEGER SQLite
_ID_MIN, _ID_MAX = -2**63, 2**63 - 1


def get_store(request: Request) -> Store:
    """Dépendance: le Store ouvert au démarrage"""
    return request.app.state.store


def get_item_id(id: Optional[str] = Query(None)) -> int:
    # ?id=<int>, sinon 400
    if id is None or not _ID_RE.fullmatch(id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id")
    item_id = int(id)
    if not _ID_MIN <= item_id <= _ID_MAX:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="invalid id")
    return item_id
