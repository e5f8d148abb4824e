from typing import Optional


class AddressError(ValueError):
    code = "INVALID_ADDRESS"
    message = "Invalid address"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class InvalidRawFormat(AddressError):
    code = "INVALID_RAW_FORMAT"
    message = "Invalid raw address format. Expected format: <workchain>:<64 hex characters>"


class InvalidUserFriendlyFormat(AddressError):
    code = "INVALID_USER_FRIENDLY_FORMAT"
    message = "Invalid user-friendly address format. Expected 48 URL-safe base64 characters"


class InvalidHash(AddressError):
    code = "INVALID_HASH"
    message = "Account hash must be 32 bytes of hex"


class InvalidEncoding(AddressError):
    code = "INVALID_ENCODING"
    message = "Address does not decode to a 36 byte payload"


class UnknownTag(AddressError):
    code = "UNKNOWN_TAG"
    message = "Unknown address tag byte"


class ChecksumMismatch(AddressError):
    code = "CHECKSUM_MISMATCH"
    message = "Address checksum does not match"
