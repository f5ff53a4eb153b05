from fastapi import APIRouter, Depends, Response, status
from typing import List, Optional
from app.db.schemas.jabon import JabonCreate, JabonUpdate, Jabon, JabonEnTienda
from app.services.jabon_service import JabonService, get_jabon_service
from app.services.tienda_service import TiendaService, get_tienda_service

router = APIRouter(
    prefix="/api/jabones",
    tags=["jabones"]
)

@router.get("", response_model=List[Jabon])
def get_all_jabones(service: JabonService = Depends(get_jabon_service)):
    """Get all jabones"""
    return service.get_all()

@router.get("/tienda/{tienda_id}", response_model=List[JabonEnTienda])
def get_jabones_por_tienda(
    tienda_id: int,
    service: JabonService = Depends(get_jabon_service),
    tiendas: TiendaService = Depends(get_tienda_service)
):
    """Get the jabones of a tienda; 404 if the tienda does not exist"""
    tienda = tiendas.get_by_id(tienda_id)
    return service.get_by_tienda(tienda)

@router.post("/tienda/{tienda_id}", response_model=Jabon)
def create_jabon_en_tienda(
    tienda_id: int,
    jabon: JabonCreate,
    service: JabonService = Depends(get_jabon_service),
    tiendas: TiendaService = Depends(get_tienda_service)
):
    """Create a jabon owned by an existing tienda"""
    tienda = tiendas.get_by_id(tienda_id)
    return service.create_in_tienda(tienda, jabon)

@router.get("/{jabon_id}", response_model=Optional[Jabon])
def get_jabon(
    jabon_id: int,
    service: JabonService = Depends(get_jabon_service)
):
    """Get a specific jabon, null when it does not exist"""
    return service.get_by_id(jabon_id)

@router.post("", response_model=Jabon)
def create_jabon(
    jabon: JabonCreate,
    service: JabonService = Depends(get_jabon_service)
):
    """Create a jabon without tienda"""
    return service.create(jabon)

@router.put("/{jabon_id}", response_model=Optional[Jabon])
def update_jabon(
    jabon_id: int,
    jabon: JabonUpdate,
    service: JabonService = Depends(get_jabon_service)
):
    """Overwrite the fields of a jabon, null when it does not exist"""
    return service.update(jabon_id, jabon)

@router.delete("/{jabon_id}")
def delete_jabon(
    jabon_id: int,
    service: JabonService = Depends(get_jabon_service)
):
    """Delete a jabon; deleting a missing id also succeeds"""
    service.delete(jabon_id)
    return Response(status_code=status.HTTP_200_OK)
