from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base

class Tienda(Base):
    __tablename__ = "tiendas"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String)
    direccion = Column(String)

    # Deleting a tienda removes its jabones
    jabones = relationship(
        "Jabon",
        back_populates="tienda",
        cascade="all, delete-orphan",
        order_by="Jabon.id",
    )

    def __repr__(self):
        return f"<Tienda(id={self.id}, nombre='{self.nombre}')>"
