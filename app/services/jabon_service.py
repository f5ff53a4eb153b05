"""
Jabon service.

Lookups and updates of a missing jabon return None instead of failing, and
deleting a missing jabon is accepted silently. Every write is committed as a
single transaction and rolled back on a database error.
"""
import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.db.crud import jabon as jabon_crud
from app.db.models.jabon import Jabon
from app.db.models.tienda import Tienda
from app.db.schemas.jabon import JabonCreate, JabonUpdate
from app.services.transaction import rollback_on_error

logger = logging.getLogger(__name__)


class JabonService:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Jabon]:
        return jabon_crud.get_jabones(self.db)

    def get_by_id(self, jabon_id: int) -> Optional[Jabon]:
        return jabon_crud.get_jabon(self.db, jabon_id)

    def get_by_tienda(self, tienda: Tienda) -> List[Jabon]:
        return jabon_crud.get_jabones_by_tienda(self.db, tienda.id)

    def create(self, jabon: JabonCreate, tienda: Optional[Tienda] = None) -> Jabon:
        with rollback_on_error(self.db):
            db_jabon = jabon_crud.create_jabon(self.db, jabon, tienda)
        logger.info("Created jabon %s (tienda=%s)", db_jabon.id, db_jabon.tienda_id)
        return db_jabon

    def create_in_tienda(self, tienda: Tienda, jabon: JabonCreate) -> Jabon:
        return self.create(jabon, tienda=tienda)

    def update(self, jabon_id: int, jabon: JabonUpdate) -> Optional[Jabon]:
        with rollback_on_error(self.db):
            db_jabon = jabon_crud.update_jabon(self.db, jabon_id, jabon)
        if db_jabon is None:
            logger.warning("Jabon %s not found, nothing updated", jabon_id)
        else:
            logger.info("Updated jabon %s", jabon_id)
        return db_jabon

    def delete(self, jabon_id: int) -> None:
        with rollback_on_error(self.db):
            deleted = jabon_crud.delete_jabon(self.db, jabon_id)
        if deleted:
            logger.info("Deleted jabon %s", jabon_id)


def get_jabon_service(db: Session = Depends(get_db)) -> JabonService:
    return JabonService(db)
