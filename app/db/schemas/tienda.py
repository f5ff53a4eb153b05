from pydantic import BaseModel
from typing import Optional
from .jabon import TiendaRead

__all__ = ['TiendaBase', 'TiendaCreate', 'TiendaUpdate', 'TiendaRead']

class TiendaBase(BaseModel):
    nombre: Optional[str] = None
    direccion: Optional[str] = None

class TiendaCreate(TiendaBase):
    pass

class TiendaUpdate(TiendaBase):
    pass
