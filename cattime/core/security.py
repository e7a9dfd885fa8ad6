# cattime/core/security.py
# Handles password hashing, JWTs, and the identity/role dependencies.
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from jose import JWTError, jwt
from passlib.context import CryptContext
from datetime import datetime, timedelta, timezone

from cattime.db import models, session
from cattime.core.config import settings
from cattime.schemas import token as token_schema

# --- Password Hashing ---
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")
def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

# --- JWT Creation ---
def create_access_token(employee_id: int) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {"sub": str(employee_id), "exp": expire}
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

# --- Identity and Role Dependencies ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token")

def get_current_employee(token: str = Depends(oauth2_scheme), db: Session = Depends(session.get_db)) -> models.Employee:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        subject = payload.get("sub")
        if subject is None:
            raise credentials_exception
        token_data = token_schema.TokenData(employee_id=int(subject))
    except (JWTError, ValueError):
        raise credentials_exception

    employee = db.get(models.Employee, token_data.employee_id)
    if employee is None:
        raise credentials_exception
    return employee

def get_current_admin(current_employee: models.Employee = Depends(get_current_employee)) -> models.Employee:
    if not current_employee.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not enough permissions for this resource")
    return current_employee
