from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.models.tienda import Tienda
from app.db.schemas.tienda import TiendaCreate, TiendaUpdate

def get_tiendas(db: Session) -> List[Tienda]:
    return db.query(Tienda).all()

def get_tienda(db: Session, tienda_id: int) -> Optional[Tienda]:
    return db.query(Tienda).filter(Tienda.id == tienda_id).first()

def create_tienda(db: Session, tienda: TiendaCreate) -> Tienda:
    db_tienda = Tienda(**tienda.model_dump())
    db.add(db_tienda)
    db.commit()
    db.refresh(db_tienda)
    return db_tienda

def update_tienda(db: Session, tienda_id: int, tienda: TiendaUpdate) -> Optional[Tienda]:
    db_tienda = get_tienda(db, tienda_id)
    if not db_tienda:
        return None

    for field, value in tienda.model_dump().items():
        setattr(db_tienda, field, value)

    db.commit()
    db.refresh(db_tienda)
    return db_tienda

def delete_tienda(db: Session, tienda_id: int) -> bool:
    db_tienda = get_tienda(db, tienda_id)
    if not db_tienda:
        return False

    # ORM cascade removes the jabones along with the tienda
    db.delete(db_tienda)
    db.commit()
    return True
