# cattime/services/working_time.py
# Business rules for working time records: access policy, month defaults,
# current session lookup and the checkin/checkout transitions.
import calendar
import logging
import threading
from collections import defaultdict
from datetime import date, timedelta
from typing import Callable, Optional

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from cattime.core.clock import Clock, SystemClock, today, time_of_day
from cattime.core.config import settings
from cattime.core.errors import ConflictError, NotAuthorizedError, NotFoundError, ValidationError
from cattime.db import models
from cattime.schemas.working_time import (
    CreateWorkingTimeRequest, UpdateWorkingTimeRequest, WorkingTimeType,
)

logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = "Mitarbeiter nicht gefunden."
WORKING_TIME_NOT_FOUND = "Arbeitszeit nicht gefunden."
END_BEFORE_START = "Endzeit muss nach der Startzeit liegen."
ALREADY_CHECKED_IN = "Es wurde bereits eingecheckt."
NOT_CHECKED_IN = "Es wurde noch nicht eingecheckt."

DENIED = {
    "list": "Nicht autorisiert Zeiten für einen anderen Mitarbeiter aufzulisten.",
    "create": "Nicht autorisiert Zeiten für einen anderen Mitarbeiter anzulegen.",
    "read": "Nicht autorisiert Zeiten für einen anderen Mitarbeiter abzurufen.",
    "update": "Nicht autorisiert Zeiten für einen anderen Mitarbeiter zu bearbeiten.",
    "delete": "Nicht autorisiert Zeiten für einen anderen Mitarbeiter zu löschen.",
}

RecencyFilter = Callable[[date], ColumnElement]


def where_is_recent_working_time(current_day: date) -> ColumnElement:
    """
    Records that may represent the currently active work session: open records
    dated today or earlier, plus closed records from today or the last
    RECENT_WORKING_TIME_DAYS days. Entries dated after today never count.
    """
    earliest = current_day - timedelta(days=settings.RECENT_WORKING_TIME_DAYS)
    return and_(
        models.WorkingTime.date <= current_day,
        or_(models.WorkingTime.end.is_(None), models.WorkingTime.date >= earliest),
    )


def month_bounds(day: date) -> tuple[date, date]:
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


class EmployeeLocks:
    """One lock per employee id, serializing checkin/checkout in this process."""

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = defaultdict(threading.Lock)

    def for_employee(self, employee_id: int) -> threading.Lock:
        with self._guard:
            return self._locks[employee_id]


employee_locks = EmployeeLocks()


class WorkingTimeService:
    def __init__(
        self,
        db: Session,
        clock: Clock | None = None,
        *,
        recency_filter: RecencyFilter = where_is_recent_working_time,
        locks: EmployeeLocks | None = None,
        validate_end_on_create: bool | None = None,
    ):
        self._db = db
        self._clock = clock or SystemClock()
        self._recency_filter = recency_filter
        self._locks = locks or employee_locks
        if validate_end_on_create is None:
            validate_end_on_create = settings.VALIDATE_END_ON_CREATE
        self._validate_end_on_create = validate_end_on_create

    # --- Lookups and access policy ---

    def _get_employee(self, employee_id: int) -> models.Employee:
        employee = self._db.get(models.Employee, employee_id)
        if employee is None:
            raise NotFoundError(EMPLOYEE_NOT_FOUND)
        return employee

    def _authorize(self, current: models.Employee, target: models.Employee, action: str) -> None:
        if current.id != target.id and not current.is_admin:
            logger.warning(
                "Employee %s denied to %s working times of employee %s", current.id, action, target.id
            )
            raise NotAuthorizedError(DENIED[action])

    def _resolve_target(self, current_employee_id: int, employee_id: Optional[int], action: str) -> models.Employee:
        target = self._get_employee(employee_id if employee_id is not None else current_employee_id)
        current = self._get_employee(current_employee_id)
        self._authorize(current, target, action)
        return target

    def _get_owned_working_time(self, current_employee_id: int, working_time_id: int, action: str) -> models.WorkingTime:
        working_time = self._db.get(models.WorkingTime, working_time_id)
        if working_time is None:
            raise NotFoundError(WORKING_TIME_NOT_FOUND)
        target = self._get_employee(working_time.employee_id)
        current = self._get_employee(current_employee_id)
        self._authorize(current, target, action)
        return working_time

    def _most_recent(self, employee_id: int) -> Optional[models.WorkingTime]:
        return (
            self._db.query(models.WorkingTime)
            .filter(models.WorkingTime.employee_id == employee_id)
            .filter(self._recency_filter(today(self._clock)))
            .order_by(models.WorkingTime.date.desc(), models.WorkingTime.start.desc())
            .first()
        )

    def _lock_employee_row(self, employee_id: int) -> models.Employee:
        # FOR UPDATE is a no-op on SQLite, the in-process lock still applies
        employee = (
            self._db.query(models.Employee)
            .filter(models.Employee.id == employee_id)
            .with_for_update()
            .first()
        )
        if employee is None:
            raise NotFoundError(EMPLOYEE_NOT_FOUND)
        return employee

    # --- Operations ---

    def list_working_times(
        self,
        current_employee_id: int,
        employee_id: Optional[int] = None,
        from_date: Optional[date] = None,
        to_date: Optional[date] = None,
    ) -> list[models.WorkingTime]:
        target = self._resolve_target(current_employee_id, employee_id, "list")

        month_start, month_end = month_bounds(today(self._clock))
        actual_from = from_date or month_start
        actual_to = to_date or month_end

        return (
            self._db.query(models.WorkingTime)
            .filter(
                models.WorkingTime.employee_id == target.id,
                models.WorkingTime.date >= actual_from,
                models.WorkingTime.date <= actual_to,
            )
            .order_by(models.WorkingTime.date, models.WorkingTime.start)
            .all()
        )

    def create(self, current_employee_id: int, request: CreateWorkingTimeRequest) -> models.WorkingTime:
        target = self._resolve_target(current_employee_id, request.employee_id, "create")

        if self._validate_end_on_create and request.end is not None and request.end < request.start:
            raise ValidationError(END_BEFORE_START)

        working_time = models.WorkingTime(
            employee_id=target.id,
            company_id=target.company_id,
            date=request.date,
            start=request.start,
            end=request.end,
            type=request.type.value,
        )
        self._db.add(working_time)
        self._db.commit()
        self._db.refresh(working_time)
        logger.info("Created working time %s for employee %s", working_time.id, target.id)
        return working_time

    def get(self, current_employee_id: int, working_time_id: int) -> models.WorkingTime:
        return self._get_owned_working_time(current_employee_id, working_time_id, "read")

    def update(
        self, current_employee_id: int, working_time_id: int, request: UpdateWorkingTimeRequest
    ) -> models.WorkingTime:
        working_time = self._get_owned_working_time(current_employee_id, working_time_id, "update")

        if request.end is not None and request.end < request.start:
            raise ValidationError(END_BEFORE_START)

        working_time.date = request.date
        working_time.start = request.start
        working_time.end = request.end
        working_time.type = request.type.value

        self._db.commit()
        self._db.refresh(working_time)
        return working_time

    def delete(self, current_employee_id: int, working_time_id: int) -> None:
        working_time = self._get_owned_working_time(current_employee_id, working_time_id, "delete")
        employee_id = working_time.employee_id
        self._db.delete(working_time)
        self._db.commit()
        logger.info("Deleted working time %s of employee %s", working_time_id, employee_id)

    def get_current(self, current_employee_id: int) -> Optional[models.WorkingTime]:
        employee = self._get_employee(current_employee_id)
        return self._most_recent(employee.id)

    def checkin(self, current_employee_id: int, type: WorkingTimeType) -> models.WorkingTime:
        with self._locks.for_employee(current_employee_id):
            employee = self._lock_employee_row(current_employee_id)

            last_working_time = self._most_recent(employee.id)
            if last_working_time is not None and last_working_time.end is None:
                self._db.rollback()
                raise ConflictError(ALREADY_CHECKED_IN)

            working_time = models.WorkingTime(
                employee_id=employee.id,
                company_id=employee.company_id,
                date=today(self._clock),
                start=time_of_day(self._clock),
                type=type.value,
            )
            self._db.add(working_time)
            self._db.commit()
            self._db.refresh(working_time)

        logger.info("Employee %s checked in (working time %s)", employee.id, working_time.id)
        return working_time

    def checkout(self, current_employee_id: int) -> models.WorkingTime:
        with self._locks.for_employee(current_employee_id):
            employee = self._lock_employee_row(current_employee_id)

            last_working_time = self._most_recent(employee.id)
            if last_working_time is None or last_working_time.end is not None:
                self._db.rollback()
                raise ConflictError(NOT_CHECKED_IN)

            last_working_time.end = time_of_day(self._clock)
            self._db.commit()
            self._db.refresh(last_working_time)

        logger.info("Employee %s checked out (working time %s)", employee.id, last_working_time.id)
        return last_working_time
