# cattime/api/v1/api.py
from fastapi import APIRouter
from cattime.api.v1.endpoints import admin, employees, working_times

api_router = APIRouter()

api_router.include_router(working_times.router, prefix="/workingtime", tags=["Working Time"])
api_router.include_router(employees.router, prefix="/employees", tags=["Employees"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
