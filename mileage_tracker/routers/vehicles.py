# mileage_tracker/routers/vehicles.py
"""Vehicle roster — CRUD for the vehicles supervisors pick from."""

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session
from mileage_tracker.database import get_db
from mileage_tracker.schemas.common import ApiResponse
from mileage_tracker.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from mileage_tracker.services import notification_service, roster_service
from mileage_tracker.services.roster_service import VEHICLES

router = APIRouter()


@router.get("/vehicles", response_model=ApiResponse[list[VehicleOut]], summary="List all vehicles")
def list_vehicles(db: Session = Depends(get_db)):
    """Active and inactive vehicles, newest first."""
    return {"success": True, "data": roster_service.list_records(db, VEHICLES)}


@router.get("/vehicles/available", response_model=ApiResponse[list[VehicleOut]],
            summary="Vehicles available for a new shift")
def list_available_vehicles(db: Session = Depends(get_db)):
    return {"success": True, "data": roster_service.list_available(db, VEHICLES)}


@router.post("/vehicles", status_code=201, response_model=ApiResponse[VehicleOut], summary="Add a vehicle")
def create_vehicle(body: VehicleCreate, background_tasks: BackgroundTasks, db: Session = Depends(get_db)):
    """License plate is uppercased and must be unique."""
    vehicle = roster_service.create_record(db, VEHICLES, body.model_dump())
    if vehicle.is_active:
        background_tasks.add_task(notification_service.dispatch,
                                  notification_service.vehicle_added(vehicle.name))
    return {"success": True, "data": vehicle}


@router.put("/vehicles/{vehicle_id}", response_model=ApiResponse[VehicleOut], summary="Update a vehicle")
def update_vehicle(vehicle_id: str, body: VehicleUpdate, db: Session = Depends(get_db)):
    """Rename, change plate, or toggle isActive. Historical entries are untouched."""
    vehicle = roster_service.update_record(db, VEHICLES, vehicle_id, body.model_dump(exclude_unset=True))
    return {"success": True, "data": vehicle}


@router.delete("/vehicles/{vehicle_id}", response_model=ApiResponse[VehicleOut], summary="Delete a vehicle")
def delete_vehicle(vehicle_id: str, db: Session = Depends(get_db)):
    """Does not cascade: mileage entries keep their vehicleId."""
    vehicle = roster_service.delete_record(db, VEHICLES, vehicle_id)
    return {"success": True, "data": vehicle}
