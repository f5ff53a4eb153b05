from sqlalchemy.orm import Session
from typing import List, Optional
from app.db.models.jabon import Jabon
from app.db.models.tienda import Tienda
from app.db.schemas.jabon import JabonCreate, JabonUpdate

def get_jabones(db: Session) -> List[Jabon]:
    return db.query(Jabon).all()

def get_jabon(db: Session, jabon_id: int) -> Optional[Jabon]:
    return db.query(Jabon).filter(Jabon.id == jabon_id).first()

def get_jabones_by_tienda(db: Session, tienda_id: int) -> List[Jabon]:
    return db.query(Jabon).filter(Jabon.tienda_id == tienda_id).order_by(Jabon.id).all()

def create_jabon(db: Session, jabon: JabonCreate, tienda: Optional[Tienda] = None) -> Jabon:
    db_jabon = Jabon(**jabon.model_dump())
    # The association is stored as given; the caller checks the tienda exists
    db_jabon.tienda = tienda
    db.add(db_jabon)
    db.commit()
    db.refresh(db_jabon)
    return db_jabon

def update_jabon(db: Session, jabon_id: int, jabon: JabonUpdate) -> Optional[Jabon]:
    db_jabon = get_jabon(db, jabon_id)
    if not db_jabon:
        return None

    # Full overwrite of the product fields, tienda is left as it is
    for field, value in jabon.model_dump().items():
        setattr(db_jabon, field, value)

    db.commit()
    db.refresh(db_jabon)
    return db_jabon

def delete_jabon(db: Session, jabon_id: int) -> bool:
    db_jabon = get_jabon(db, jabon_id)
    if not db_jabon:
        return False

    db.delete(db_jabon)
    db.commit()
    return True
