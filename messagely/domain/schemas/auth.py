"""Pydantic schemas for the auth routes."""

from pydantic import BaseModel, Field, field_validator

from messagely.core.security import password_problem


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)
    first_name: str
    last_name: str
    phone: str

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        problem = password_problem(value)
        if problem:
            raise ValueError(problem)
        return value


class TokenResponse(BaseModel):
    token: str
