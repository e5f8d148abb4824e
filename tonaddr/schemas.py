from typing import Optional
from pydantic import BaseModel

from tonaddr.utils.ton_address import AddressType


class AddressRequest(BaseModel):
    address: str


class ConvertRequest(AddressRequest):
    from_type: Optional[AddressType] = None
    to_type: Optional[AddressType] = None


class ConvertResponse(BaseModel):
    original: str
    from_type: AddressType
    to_type: AddressType
    result: str


class ValidateResponse(BaseModel):
    address: str
    is_raw: bool
    is_user_friendly: bool
    detected_type: Optional[AddressType] = None


class AddressInfoResponse(BaseModel):
    raw: str
    user_friendly: str
    workchain: int
    hash: str
    checksum: str
