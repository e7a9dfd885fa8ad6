# cattime/api/v1/endpoints/employees.py
from fastapi import APIRouter, Depends

from cattime.db import models
from cattime.core import security
from cattime.schemas import employee as employee_schema

router = APIRouter()

@router.get("/me", response_model=employee_schema.Employee)
def read_employee_me(current_employee: models.Employee = Depends(security.get_current_employee)):
    """
    Get the details for the currently logged-in employee.
    """
    return current_employee
