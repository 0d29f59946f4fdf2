from datetime import date, datetime
from pydantic import EmailStr, Field
from typing import Dict, Optional
from storefront.model.base_schema import CamelModel

class RoleResponse(CamelModel):
    name: str
    level: int

class ProfileUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    hire_date: Optional[date] = None

class ProfileResponse(ProfileUpdate):
    id: Optional[int] = None

class UserCreate(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    profile: Optional[ProfileUpdate] = None

class UserResponse(CamelModel):
    id: int
    email: EmailStr
    role: RoleResponse
    profile: Optional[ProfileResponse] = None

class UserLogin(CamelModel):
    email: str
    password: str

class SessionUser(CamelModel):
    id: int
    email: str
    role: RoleResponse
    profile: Optional[ProfileResponse] = None

class SessionResponse(CamelModel):
    user: SessionUser
    expires: datetime

class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: SessionUser

class UserStats(CamelModel):
    total: int
    by_role: Dict[str, int] = {}

class PasswordChange(CamelModel):
    current_password: str
    new_password: str = Field(..., min_length=6)
