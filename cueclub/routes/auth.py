"""
Authentication Routes
Login, logout, password change and first-admin setup endpoints
"""

from fastapi import APIRouter, Depends, status

from cueclub.auth import create_access_token, get_admin
from cueclub.schemas.admin import (
    LoginRequest,
    LoginResponse,
    ChangePasswordRequest,
    SetupRequest,
    SetupStatusResponse,
    AdminUserResponse,
)
from cueclub.services.admin_service import admin_service, ADMIN_ROLE

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest):
    """
    Login endpoint for club admins

    Process:
    1. Look up the account together with its admin role
    2. Verify password
    3. Update last_login timestamp
    4. Create JWT token
    """
    admin = await admin_service.authenticate(credentials.email, credentials.password)

    access_token = create_access_token({
        "sub": admin["email"],
        "email": admin["email"],
        "user_id": str(admin["id"]),
        "role": ADMIN_ROLE
    })

    return {
        "status": "success",
        "message": "Login successful",
        "access_token": access_token,
        "token_type": "bearer",
        "email": admin["email"]
    }


@router.post("/change-password")
async def change_password(
    request: ChangePasswordRequest,
    current_admin: dict = Depends(get_admin)
):
    """
    Change password for current admin
    """
    await admin_service.change_password(current_admin["user_id"], request)
    return {
        "status": "success",
        "message": "Password changed successfully"
    }


@router.post("/logout")
async def logout():
    """
    Logout endpoint (client should delete token)
    """
    return {
        "status": "success",
        "message": "Logged out successfully"
    }


@router.get("/me", response_model=AdminUserResponse)
async def get_current_admin_info(current_admin: dict = Depends(get_admin)):
    """
    Get current authenticated admin information
    """
    return await admin_service.get_admin(current_admin["user_id"])


@router.get("/setup-status", response_model=SetupStatusResponse)
async def setup_status():
    """Whether the first admin account has been created"""
    return {"admin_exists": await admin_service.admin_exists()}


@router.post("/setup", response_model=AdminUserResponse, status_code=status.HTTP_201_CREATED)
async def setup_first_admin(request: SetupRequest):
    """
    Create the first admin account

    Only available while no admin exists; afterwards returns 403.
    """
    return await admin_service.create_first_admin(request)
