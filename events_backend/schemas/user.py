"""Pydantic schemas for Users and authentication."""
from __future__ import annotations
from pydantic import BaseModel, EmailStr, Field, model_validator


class UserCreate(BaseModel):
    username: str = Field(min_length=5)
    password: str = Field(min_length=8)
    retyped_password: str = Field(min_length=8)
    email: EmailStr
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)

    @model_validator(mode="after")
    def _passwords_match(self):
        if self.password != self.retyped_password:
            raise ValueError("Passwords are not identical")
        return self


class UserOut(BaseModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}


class UserCreated(UserOut):
    token: str


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    user_id: int
    first_name: str
    last_name: str
    token: str
