"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session
from domain.models import get_db_session
from services.shopping_service import ShoppingService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_shopping_service(db: Session = Depends(get_db)) -> ShoppingService:
    """Shopping service bound to the request's database session."""
    return ShoppingService(db)
