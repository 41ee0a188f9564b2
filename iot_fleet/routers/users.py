from fastapi import APIRouter, Depends
from iot_fleet.exceptions import NotFound
from iot_fleet.schemas.user import UserResponse, UserCreate, UserUpdate
from iot_fleet.services import UserService
from iot_fleet.store import FleetStore, get_store
from typing import List

router = APIRouter(prefix="/api/v1/users", tags=["users"])

def get_user_service(store: FleetStore = Depends(get_store)) -> UserService:
    return UserService(store)

@router.get("/", response_model=List[UserResponse])
def get_users(service: UserService = Depends(get_user_service)):
    """Get all users"""
    return service.get_all()

@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Get user by ID"""
    user = service.get_by_id(user_id)
    if not user:
        raise NotFound("User not found", code="USER_NOT_FOUND")
    return user

@router.post("/", response_model=UserResponse, status_code=201)
def create_user(user: UserCreate, service: UserService = Depends(get_user_service)):
    """Create a user with a unique email"""
    return service.create(user.model_dump())

@router.patch("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, user: UserUpdate, service: UserService = Depends(get_user_service)):
    """Update the supplied fields of a user"""
    updated = service.update(user_id, user.model_dump(exclude_unset=True))
    if not updated:
        raise NotFound("User not found", code="USER_NOT_FOUND")
    return updated

@router.delete("/{user_id}")
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    """Delete a user that owns no devices"""
    deleted = service.delete(user_id)
    if deleted is None:
        raise NotFound("User not found", code="USER_NOT_FOUND")
    return {"message": "User deleted", "id": deleted}
