from pydantic import BaseModel
from typing import Optional


class PhoneOTPRequest(BaseModel):
    phone: Optional[str] = None


class PhoneOTPVerify(BaseModel):
    phone: Optional[str] = None
    otp: Optional[str] = None


class PhoneOTPSent(BaseModel):
    success: bool = True
    message: str
    phone: str
    expiresIn: int


class PhoneVerified(BaseModel):
    success: bool = True
    message: str
    phone: str
