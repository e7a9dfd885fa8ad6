# cattime/api/v1/endpoints/working_times.py
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from cattime.core import security
from cattime.core.clock import Clock, get_clock
from cattime.db import models, session
from cattime.schemas import working_time as working_time_schema
from cattime.services.working_time import WorkingTimeService

router = APIRouter()

def get_working_time_service(
    db: Session = Depends(session.get_db),
    clock: Clock = Depends(get_clock),
) -> WorkingTimeService:
    return WorkingTimeService(db, clock)

# --- API Endpoints ---
# /current and /actions/* are registered before /{id} so they are not taken for ids.

@router.get("", response_model=List[working_time_schema.WorkingTime])
def list_working_times(
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    """ Lists an employee's working times, by default those of the current month. """
    return service.list_working_times(current_employee.id, employee_id, from_date, to_date)

@router.post("", response_model=working_time_schema.WorkingTime)
def create_working_time(
    request: working_time_schema.CreateWorkingTimeRequest,
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    return service.create(current_employee.id, request)

@router.get("/current", response_model=working_time_schema.WorkingTime)
def read_current_working_time(
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    """ Returns the record of the current work session, or a bare 404 if there is none. """
    working_time = service.get_current(current_employee.id)
    if working_time is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return working_time

@router.post("/actions/checkin", response_model=working_time_schema.WorkingTime)
def checkin(
    request: working_time_schema.CheckinRequest,
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    return service.checkin(current_employee.id, request.type)

@router.post("/actions/checkout", response_model=working_time_schema.WorkingTime)
def checkout(
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    return service.checkout(current_employee.id)

@router.get("/{id}", response_model=working_time_schema.WorkingTime)
def read_working_time(
    id: int,
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    return service.get(current_employee.id, id)

@router.put("/{id}", response_model=working_time_schema.WorkingTime)
def update_working_time(
    id: int,
    request: working_time_schema.UpdateWorkingTimeRequest,
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    return service.update(current_employee.id, id, request)

@router.delete("/{id}", status_code=status.HTTP_200_OK)
def delete_working_time(
    id: int,
    service: WorkingTimeService = Depends(get_working_time_service),
    current_employee: models.Employee = Depends(security.get_current_employee),
):
    service.delete(current_employee.id, id)
    return Response(status_code=status.HTTP_200_OK)
