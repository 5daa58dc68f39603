# cruise_booking/routes/cruises.py
from typing import List

from fastapi import APIRouter, Depends, Response, status

from cruise_booking import auth, errors, schemas
from cruise_booking.dependencies import get_catalog
from cruise_booking.services.catalog import CruiseCatalog

router = APIRouter(
    prefix="/api",
    tags=["Cruises"]
)

# Public - List All Cruises
@router.get("/cruises", response_model=List[schemas.Cruise])
def list_cruises(catalog: CruiseCatalog = Depends(get_catalog)):
    return catalog.list()

# Public - Cruise Details
@router.get("/cruises/{cruise_id}", response_model=schemas.Cruise)
def get_cruise(cruise_id: int, catalog: CruiseCatalog = Depends(get_catalog)):
    cruise = catalog.get(cruise_id)
    if cruise is None:
        raise errors.NotFound("Cruise not found")
    return cruise

# Admin Only - Create a Cruise
@router.post(
    "/cruises",
    response_model=schemas.Cruise,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(auth.verify_admin_user)],
)
def create_cruise(cruise: schemas.CruiseCreate, catalog: CruiseCatalog = Depends(get_catalog)):
    return catalog.create(cruise)

# Admin Only - Update a Cruise
@router.put("/cruises/{cruise_id}", response_model=schemas.Cruise, dependencies=[Depends(auth.verify_admin_user)])
def update_cruise(cruise_id: int, cruise: schemas.CruiseCreate, catalog: CruiseCatalog = Depends(get_catalog)):
    updated = catalog.update(cruise_id, cruise)
    if updated is None:
        raise errors.NotFound("Cruise not found")
    return updated

# Admin Only - Delete a Cruise
@router.delete(
    "/cruises/{cruise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(auth.verify_admin_user)],
)
def delete_cruise(cruise_id: int, catalog: CruiseCatalog = Depends(get_catalog)):
    if not catalog.delete(cruise_id):
        raise errors.NotFound("Cruise not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
