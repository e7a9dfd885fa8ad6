# cattime/db/models.py
from sqlalchemy import ( Column, Integer, String, ForeignKey, Date, Time, CheckConstraint )
from sqlalchemy.orm import relationship, declarative_base

Base = declarative_base()

class Employee(Base):
    __tablename__ = "employees"
    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, nullable=False, index=True)
    full_name = Column(String(100))
    email = Column(String(100), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default="employee")
    __table_args__ = ( CheckConstraint("role IN ('employee', 'admin')"), )
    working_times = relationship("WorkingTime", back_populates="employee")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

class WorkingTime(Base):
    __tablename__ = "working_times"
    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)
    company_id = Column(Integer, nullable=False)
    date = Column(Date, nullable=False, index=True)
    start = Column(Time, nullable=False)
    end = Column(Time, nullable=True)
    type = Column(String(20), nullable=False)
    employee = relationship("Employee", back_populates="working_times")
