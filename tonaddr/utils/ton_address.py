import base64
import binascii
import logging
import re
from enum import Enum
from typing import NamedTuple, Optional

from tonaddr.utils.crc16 import checksum16
from tonaddr.utils.errors import (
    AddressError,
    ChecksumMismatch,
    InvalidEncoding,
    InvalidHash,
    InvalidRawFormat,
    InvalidUserFriendlyFormat,
    UnknownTag,
)

logger = logging.getLogger(__name__)

RAW_ADDRESS_RE = re.compile(r'^-?[0-9]:[0-9a-fA-F]{64}$')
USER_FRIENDLY_ADDRESS_RE = re.compile(r'^[A-Za-z0-9_-]{48}$')

HASH_LENGTH = 32
PAYLOAD_LENGTH = 36
NON_BOUNCEABLE_FLAG = 0x00

WORKCHAIN_TO_TAG = {0: 0x51, -1: 0x71}
TAG_TO_WORKCHAIN = {tag: workchain for workchain, tag in WORKCHAIN_TO_TAG.items()}


class AddressType(str, Enum):
    RAW = "raw"
    USER_FRIENDLY = "user_friendly"


class DecodedAddress(NamedTuple):
    workchain: int
    hash_part: bytes
    flag: int
    checksum: bytes

    @property
    def raw(self) -> str:
        return f"{self.workchain}:{self.hash_part.hex()}"


def is_valid_raw_address(address) -> bool:
    if not isinstance(address, str):
        return False
    return RAW_ADDRESS_RE.fullmatch(address) is not None


def is_valid_user_friendly_address(address) -> bool:
    """Length and alphabet only; the checksum is verified by decoding."""
    if not isinstance(address, str):
        return False
    return USER_FRIENDLY_ADDRESS_RE.fullmatch(address) is not None


def detect_address_type(address) -> Optional[AddressType]:
    if is_valid_raw_address(address):
        return AddressType.RAW
    if is_valid_user_friendly_address(address):
        return AddressType.USER_FRIENDLY
    return None


def encode_user_friendly(raw_address: str) -> str:
    """
    Encode ``<workchain>:<hash>`` into the 48 character user-friendly form.

    Payload layout is ``tag || flag || hash || crc16``, where the tag selects
    the workchain (0x51 for 0, 0x71 for -1) and the flag is always 0x00.
    """
    if not is_valid_raw_address(raw_address):
        raise InvalidRawFormat()

    workchain_part, hash_hex = raw_address.split(':')
    tag = WORKCHAIN_TO_TAG.get(int(workchain_part))
    if tag is None:
        raise InvalidRawFormat(f"Unsupported workchain: {workchain_part}")

    try:
        hash_bytes = bytes.fromhex(hash_hex)
    except ValueError as e:
        raise InvalidHash(f"Invalid account hash: {e}") from e
    if len(hash_bytes) != HASH_LENGTH:
        raise InvalidHash()

    addr = bytes([tag, NON_BOUNCEABLE_FLAG]) + hash_bytes
    addr_with_crc = addr + checksum16(addr)

    encoded = base64.urlsafe_b64encode(addr_with_crc).decode('ascii')
    return encoded.rstrip('=')


def parse_user_friendly(address: str) -> DecodedAddress:
    """Decode a user-friendly address into its parts, verifying the checksum."""
    if not is_valid_user_friendly_address(address):
        raise InvalidUserFriendlyFormat()

    padded = address + '=' * (-len(address) % 4)
    try:
        address_bytes = base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding(f"Invalid base64: {e}") from e
    if len(address_bytes) != PAYLOAD_LENGTH:
        raise InvalidEncoding()

    tag = address_bytes[0]
    workchain = TAG_TO_WORKCHAIN.get(tag)
    if workchain is None:
        raise UnknownTag(f"Unknown address tag byte: 0x{tag:02x}")

    hash_part = address_bytes[2:34]
    carried = address_bytes[34:36]
    if checksum16(address_bytes[:34]) != carried:
        raise ChecksumMismatch()

    return DecodedAddress(
        workchain=workchain,
        hash_part=hash_part,
        flag=address_bytes[1],
        checksum=carried,
    )


def decode_user_friendly(address: str) -> str:
    return parse_user_friendly(address).raw


def convert(address: str, from_type: AddressType, to_type: AddressType) -> Optional[str]:
    """
    Convert ``address`` between formats.

    Returns ``None`` on any failure instead of raising; the reason is logged.
    """
    from_type = AddressType(from_type)
    to_type = AddressType(to_type)

    if from_type == to_type:
        if detect_address_type(address) == from_type:
            return address
        logger.warning(f"Address {address!r} is not a valid {from_type.value} address")
        return None

    try:
        if from_type == AddressType.RAW:
            return encode_user_friendly(address)
        return decode_user_friendly(address)
    except AddressError as e:
        logger.warning(f"Error converting address {address!r} from {from_type.value} to {to_type.value}: {e}")
        return None
