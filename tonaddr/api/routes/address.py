from fastapi import APIRouter, HTTPException, status
from tonaddr.schemas import (
    AddressInfoResponse,
    AddressRequest,
    ConvertRequest,
    ConvertResponse,
    ValidateResponse,
)
from tonaddr.utils.errors import AddressError, InvalidRawFormat, InvalidUserFriendlyFormat
from tonaddr.utils.ton_address import (
    AddressType,
    decode_user_friendly,
    detect_address_type,
    encode_user_friendly,
    is_valid_raw_address,
    is_valid_user_friendly_address,
    parse_user_friendly,
)
import logging

router = APIRouter()
logger = logging.getLogger(__name__)

FORMAT_ERRORS = {
    AddressType.RAW: InvalidRawFormat,
    AddressType.USER_FRIENDLY: InvalidUserFriendlyFormat,
}


def bad_request(code: str, message: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error": {
                "code": code,
                "message": message
            }
        }
    )


def require_address(address: str) -> str:
    address = address.strip()
    if not address:
        raise bad_request("EMPTY_ADDRESS", "Please enter an address")
    return address


@router.post("/convert", response_model=ConvertResponse)
async def convert_address(request: ConvertRequest):
    address = require_address(request.address)

    from_type = request.from_type or detect_address_type(address)
    if from_type is None:
        raise bad_request(
            "UNKNOWN_ADDRESS_FORMAT",
            "Address is neither a raw nor a user-friendly address"
        )

    to_type = request.to_type
    if to_type is None:
        to_type = AddressType.USER_FRIENDLY if from_type == AddressType.RAW else AddressType.RAW

    try:
        if from_type == to_type:
            if detect_address_type(address) != from_type:
                raise FORMAT_ERRORS[from_type]()
            result = address
        elif from_type == AddressType.RAW:
            result = encode_user_friendly(address)
        else:
            result = decode_user_friendly(address)
    except AddressError as e:
        logger.warning(f"❌ Failed to convert {address}: {e.code}")
        raise bad_request(e.code, str(e))

    logger.info(f"🔄 Converted {address} ({from_type.value}) -> {result} ({to_type.value})")

    return ConvertResponse(
        original=address,
        from_type=from_type,
        to_type=to_type,
        result=result
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate_address(request: AddressRequest):
    address = request.address.strip()

    return ValidateResponse(
        address=address,
        is_raw=is_valid_raw_address(address),
        is_user_friendly=is_valid_user_friendly_address(address),
        detected_type=detect_address_type(address)
    )


@router.post("/parse", response_model=AddressInfoResponse)
async def parse_address(request: AddressRequest):
    address = require_address(request.address)

    try:
        if detect_address_type(address) == AddressType.RAW:
            user_friendly = encode_user_friendly(address)
        else:
            user_friendly = address
        decoded = parse_user_friendly(user_friendly)
    except AddressError as e:
        raise bad_request(e.code, str(e))

    return AddressInfoResponse(
        raw=decoded.raw,
        user_friendly=user_friendly,
        workchain=decoded.workchain,
        hash=decoded.hash_part.hex(),
        checksum=decoded.checksum.hex()
    )
