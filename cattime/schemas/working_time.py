# cattime/schemas/working_time.py
# Request bodies and the external record view. JSON uses camelCase keys.
from enum import Enum
import datetime as dt
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class WorkingTimeType(str, Enum):
    WORK = "work"
    VACATION = "vacation"
    SICK = "sick"
    HOLIDAY = "holiday"
    OTHER = "other"

class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class WorkingTimeFields(CamelModel):
    date: dt.date
    start: dt.time
    end: Optional[dt.time] = None
    type: WorkingTimeType

class CreateWorkingTimeRequest(WorkingTimeFields):
    employee_id: Optional[int] = None

class UpdateWorkingTimeRequest(WorkingTimeFields):
    pass

class CheckinRequest(CamelModel):
    type: WorkingTimeType

class WorkingTime(WorkingTimeFields):
    id: int
    employee_id: int
    company_id: int

    class Config:
        from_attributes = True
