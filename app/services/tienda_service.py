"""
Tienda service.

Wraps the tienda repository functions. A lookup of a missing tienda raises
TiendaNotFoundError, which the application turns into a 404 response.
"""
import logging
from typing import List

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.db.crud import tienda as tienda_crud
from app.db.models.tienda import Tienda
from app.db.schemas.tienda import TiendaCreate, TiendaUpdate
from app.services.exceptions import TiendaNotFoundError
from app.services.transaction import rollback_on_error

logger = logging.getLogger(__name__)


class TiendaService:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Tienda]:
        return tienda_crud.get_tiendas(self.db)

    def get_by_id(self, tienda_id: int) -> Tienda:
        tienda = tienda_crud.get_tienda(self.db, tienda_id)
        if tienda is None:
            logger.warning("Tienda %s not found", tienda_id)
            raise TiendaNotFoundError(tienda_id)
        return tienda

    def create(self, tienda: TiendaCreate) -> Tienda:
        with rollback_on_error(self.db):
            db_tienda = tienda_crud.create_tienda(self.db, tienda)
        logger.info("Created tienda %s", db_tienda.id)
        return db_tienda

    def update(self, tienda_id: int, tienda: TiendaUpdate) -> Tienda:
        with rollback_on_error(self.db):
            db_tienda = tienda_crud.update_tienda(self.db, tienda_id, tienda)
        if db_tienda is None:
            logger.warning("Tienda %s not found for update", tienda_id)
            raise TiendaNotFoundError(tienda_id)
        logger.info("Updated tienda %s", tienda_id)
        return db_tienda

    def delete(self, tienda_id: int) -> None:
        """Delete a tienda and its jabones; a missing id is a no-op."""
        with rollback_on_error(self.db):
            deleted = tienda_crud.delete_tienda(self.db, tienda_id)
        if deleted:
            logger.info("Deleted tienda %s", tienda_id)


def get_tienda_service(db: Session = Depends(get_db)) -> TiendaService:
    return TiendaService(db)
