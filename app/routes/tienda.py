from fastapi import APIRouter, Depends, Response, status
from typing import List
from app.db.schemas.tienda import TiendaCreate, TiendaUpdate, TiendaRead
from app.services.tienda_service import TiendaService, get_tienda_service

router = APIRouter(
    prefix="/api/tiendas",
    tags=["tiendas"]
)

@router.get("", response_model=List[TiendaRead])
def get_all_tiendas(service: TiendaService = Depends(get_tienda_service)):
    """Get all tiendas with their jabones"""
    return service.get_all()

@router.post("", response_model=TiendaRead)
def create_tienda(
    tienda: TiendaCreate,
    service: TiendaService = Depends(get_tienda_service)
):
    """Create a new tienda"""
    return service.create(tienda)

@router.get("/{tienda_id}", response_model=TiendaRead)
def get_tienda(
    tienda_id: int,
    service: TiendaService = Depends(get_tienda_service)
):
    """Get a specific tienda"""
    return service.get_by_id(tienda_id)

@router.put("/{tienda_id}", response_model=TiendaRead)
def update_tienda(
    tienda_id: int,
    tienda: TiendaUpdate,
    service: TiendaService = Depends(get_tienda_service)
):
    """Overwrite nombre and direccion of a tienda"""
    return service.update(tienda_id, tienda)

@router.delete("/{tienda_id}")
def delete_tienda(
    tienda_id: int,
    service: TiendaService = Depends(get_tienda_service)
):
    """Delete a tienda together with its jabones"""
    service.delete(tienda_id)
    return Response(status_code=status.HTTP_200_OK)
