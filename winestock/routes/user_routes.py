"""
User Management Routes
======================

Routes for user CRUD
"""

from fastapi import APIRouter, Depends, status, Query
from typing import Dict, Any, Optional

from ..services import ServiceRegistry
from ..schemas import UserSchema, UserCreateSchema, UserUpdateSchema, UserListItemSchema
from ..dependencies import get_service_registry
from ..responses import APIResponse

user_router = APIRouter()

@user_router.get("", response_model=Dict[str, Any])
async def list_users(
    search: Optional[str] = Query(None),
    service_registry: ServiceRegistry = Depends(get_service_registry)
):
    """
    List users, newest first

    **Query Parameters:**
    - search: case-insensitive match on the user's name
    """
    users = await service_registry.user_service.list_users(search)
    data = [UserListItemSchema.model_validate(user).model_dump() for user in users]
    return APIResponse.success(data=data, message="Users retrieved successfully")

@user_router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreateSchema,
    service_registry: ServiceRegistry = Depends(get_service_registry)
):
    """Create new user"""
    result = await service_registry.user_service.create_user(user_data)
    return APIResponse.success(data=result, message="User created successfully")

@user_router.get("/{user_id}", response_model=Dict[str, Any])
async def get_user(
    user_id: str,
    service_registry: ServiceRegistry = Depends(get_service_registry)
):
    """Get user by ID with roles and associated customer"""
    user = await service_registry.user_service.get_user(user_id)
    return APIResponse.success(
        data=UserSchema.model_validate(user).model_dump(),
        message="User retrieved successfully"
    )

@user_router.put("/{user_id}", response_model=Dict[str, Any])
async def update_user(
    user_id: str,
    user_data: UserUpdateSchema,
    service_registry: ServiceRegistry = Depends(get_service_registry)
):
    """Update user; send ``password`` only to change it"""
    result = await service_registry.user_service.update_user(user_data, user_id)
    return APIResponse.success(data=result, message="User updated successfully")

@user_router.delete("/{user_id}", response_model=Dict[str, Any])
async def delete_user(
    user_id: str,
    service_registry: ServiceRegistry = Depends(get_service_registry)
):
    await service_registry.user_service.delete_user(user_id)
    return APIResponse.success(message="User deleted successfully")
