# cattime/schemas/employee.py
from enum import Enum
from pydantic import BaseModel, EmailStr
from pydantic.alias_generators import to_camel
from typing import Optional

class EmployeeRole(str, Enum):
    EMPLOYEE = "employee"
    ADMIN = "admin"

class EmployeeBase(BaseModel):
    email: EmailStr
    full_name: Optional[str] = None
    company_id: int
    role: EmployeeRole = EmployeeRole.EMPLOYEE

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class EmployeeCreate(EmployeeBase):
    password: str

class Employee(EmployeeBase):
    id: int

    class Config:
        from_attributes = True
