"""Task service"""

from datetime import datetime
from typing import Optional


def today() -> str:
    # date locale du serveur, format YYYY-MM-DD
    return datetime.today().date().strftime("%Y-%m-%d")


def resolve_date(date: Optional[str]) -> str:
    """Date vide ou absente = aujourd'hui."""
    if not date:
        return today()
    return date
