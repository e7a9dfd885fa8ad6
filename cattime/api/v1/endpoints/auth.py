# cattime/api/v1/endpoints/auth.py
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session
from cattime.db import session, models
from cattime.core import security
from cattime.schemas import token as token_schema

router = APIRouter()

@router.post("/token", response_model=token_schema.Token)
def login(db: Session = Depends(session.get_db), form_data: OAuth2PasswordRequestForm = Depends()):
    employee = db.query(models.Employee).filter(models.Employee.email == form_data.username).first()
    if not employee or not security.verify_password(form_data.password, employee.hashed_password):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect username or password")

    access_token = security.create_access_token(employee.id)
    return {"access_token": access_token, "token_type": "bearer"}
