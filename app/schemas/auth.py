from pydantic import BaseModel, EmailStr, field_validator


# ─── Request Schemas ──────────────────────────────────────────────────────────
class LoginRequest(BaseModel):
    email:    EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def check_password(cls, v):
        if not v: raise ValueError("Password is required")
        return v
