# cattime/api/v1/endpoints/admin.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
import logging

from cattime.db import models, session
from cattime.core import security
from cattime.schemas import employee as employee_schema

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/employees", response_model=employee_schema.Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee_in: employee_schema.EmployeeCreate,
    db: Session = Depends(session.get_db),
    admin: models.Employee = Depends(security.get_current_admin)
):
    """ Registers a new employee in the directory. """
    if db.query(models.Employee).filter(models.Employee.email == employee_in.email).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")

    db_employee = models.Employee(
        email=employee_in.email, full_name=employee_in.full_name,
        hashed_password=security.get_password_hash(employee_in.password),
        role=employee_in.role.value, company_id=employee_in.company_id,
    )
    db.add(db_employee)
    db.commit()
    db.refresh(db_employee)
    logger.info("Admin %s created employee %s", admin.id, db_employee.id)
    return db_employee

@router.get("/employees", response_model=List[employee_schema.Employee])
def get_all_employees(
    db: Session = Depends(session.get_db),
    admin: models.Employee = Depends(security.get_current_admin)
):
    """ Retrieves a list of all employees. """
    return db.query(models.Employee).order_by(models.Employee.id).all()
