from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import List, Optional

class JabonBase(BaseModel):
    nombre: Optional[str] = Field(None, description="Nombre del jabón")
    marca: Optional[str] = None
    fragancia: Optional[str] = None
    precio: float = Field(0.0, description="Precio, sin validación de rango")
    stock: int = Field(0, description="Unidades disponibles")
    tipo: Optional[str] = None

    @field_validator("precio", "stock", mode="before")
    @classmethod
    def empty_as_zero(cls, value):
        # Forms send null or "" for an untouched number
        if value is None or value == "":
            return 0
        return value

class JabonCreate(JabonBase):
    pass

class JabonUpdate(JabonBase):
    pass

class JabonEnTienda(JabonBase):
    """Jabon as listed inside a tienda; carries no back-reference"""
    id: int

    model_config = ConfigDict(from_attributes=True)

# Defined here rather than in schemas.tienda so Jabon can embed it
class TiendaRead(BaseModel):
    id: int
    nombre: Optional[str] = None
    direccion: Optional[str] = None
    jabones: List[JabonEnTienda] = []

    model_config = ConfigDict(from_attributes=True)

class Jabon(JabonEnTienda):
    tienda: Optional[TiendaRead] = None
