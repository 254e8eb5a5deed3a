# mileage_tracker/routers/supervisors.py
"""Supervisor roster — CRUD."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from mileage_tracker.database import get_db
from mileage_tracker.schemas.common import ApiResponse
from mileage_tracker.schemas.supervisor import SupervisorCreate, SupervisorOut, SupervisorUpdate
from mileage_tracker.services import roster_service
from mileage_tracker.services.roster_service import SUPERVISORS

router = APIRouter()


@router.get("/supervisors", response_model=ApiResponse[list[SupervisorOut]], summary="List all supervisors")
def list_supervisors(db: Session = Depends(get_db)):
    return {"success": True, "data": roster_service.list_records(db, SUPERVISORS)}


@router.get("/supervisors/available", response_model=ApiResponse[list[SupervisorOut]],
            summary="Active supervisors")
def list_available_supervisors(db: Session = Depends(get_db)):
    return {"success": True, "data": roster_service.list_available(db, SUPERVISORS)}


@router.post("/supervisors", status_code=201, response_model=ApiResponse[SupervisorOut],
             summary="Add a supervisor")
def create_supervisor(body: SupervisorCreate, db: Session = Depends(get_db)):
    """Badge number must be unique."""
    supervisor = roster_service.create_record(db, SUPERVISORS, body.model_dump())
    return {"success": True, "data": supervisor}


@router.put("/supervisors/{supervisor_id}", response_model=ApiResponse[SupervisorOut],
            summary="Update a supervisor")
def update_supervisor(supervisor_id: str, body: SupervisorUpdate, db: Session = Depends(get_db)):
    supervisor = roster_service.update_record(db, SUPERVISORS, supervisor_id,
                                              body.model_dump(exclude_unset=True))
    return {"success": True, "data": supervisor}


@router.delete("/supervisors/{supervisor_id}", response_model=ApiResponse[SupervisorOut],
               summary="Delete a supervisor")
def delete_supervisor(supervisor_id: str, db: Session = Depends(get_db)):
    """Past entries keep the supervisor's name as recorded."""
    supervisor = roster_service.delete_record(db, SUPERVISORS, supervisor_id)
    return {"success": True, "data": supervisor}
