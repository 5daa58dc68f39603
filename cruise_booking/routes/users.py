# cruise_booking/routes/users.py
from typing import List

from fastapi import APIRouter, Depends, status

from cruise_booking import auth, errors, schemas, security
from cruise_booking.dependencies import get_accounts
from cruise_booking.services.accounts import AccountService

router = APIRouter(
    prefix="/api",
    tags=["Users"]
)

# User Registration (always a normal user)
@router.post("/register", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
def register_user(user: schemas.UserCreate, accounts: AccountService = Depends(get_accounts)):
    new_user = accounts.register(user)
    return {"user": new_user, "access_token": security.token_for_user(new_user)}

# User Login (JWT)
@router.post("/login", response_model=schemas.AuthResponse)
def login_user(credentials: schemas.UserLogin, accounts: AccountService = Depends(get_accounts)):
    user = accounts.authenticate(credentials.username, credentials.password)
    if user is None:
        raise errors.Unauthorized("Invalid username or password")
    return {"user": user, "access_token": security.token_for_user(user)}

# Tokens are stateless; the client just drops its copy
@router.post("/logout", response_model=schemas.Message)
def logout_user():
    return {"message": "Logged out"}

@router.get("/user", response_model=schemas.UserPublic)
def current_user(user: schemas.User = Depends(auth.get_current_user)):
    return user

# Admin Only - List Users (passwords stripped)
@router.get("/admin/users", response_model=List[schemas.UserPublic], dependencies=[Depends(auth.verify_admin_user)])
def list_users(accounts: AccountService = Depends(get_accounts)):
    return accounts.list_users()
