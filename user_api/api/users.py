"""
Users API endpoints.

Listing, creation, and age-filtered listing of users.
"""
from typing import List
from fastapi import APIRouter, Depends, Query

from user_api.db import schemas
from user_api.db.schemas.users import INT32_MAX, INT32_MIN
from user_api.api.deps import get_user_service
from user_api.services.user_service import UserService

router = APIRouter(prefix="/user-api/v1", tags=["users"])


@router.get("/users", response_model=List[schemas.User])
def get_all_users(service: UserService = Depends(get_user_service)):
    return service.find_all_users()


@router.post("/users", response_model=schemas.User)
def add_user(
    user: schemas.UserCreate,
    service: UserService = Depends(get_user_service),
):
    return service.save_user(user)


@router.get("/additional-info", response_model=List[schemas.User])
def get_users_by_age(
    age: int = Query(..., ge=INT32_MIN, le=INT32_MAX, description="Minimum age, inclusive"),
    service: UserService = Depends(get_user_service),
):
    return service.find_users_by_min_age(age)
