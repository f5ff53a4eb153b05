from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base

class Jabon(Base):
    __tablename__ = "jabones"

    id = Column(Integer, primary_key=True, index=True)
    nombre = Column(String)
    marca = Column(String)
    fragancia = Column(String)
    precio = Column(Float, nullable=False, default=0.0)
    stock = Column(Integer, nullable=False, default=0)
    tipo = Column(String)
    tienda_id = Column(Integer, ForeignKey("tiendas.id", ondelete="CASCADE"), nullable=True, index=True)

    tienda = relationship("Tienda", back_populates="jabones")

    def __repr__(self):
        return f"<Jabon(id={self.id}, nombre='{self.nombre}', tienda_id={self.tienda_id})>"
