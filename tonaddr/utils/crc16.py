CRC16_POLYNOMIAL = 0x1021


def crc16(data: bytes, initial: int = 0x0000) -> int:
    """CRC-16/XMODEM over ``data``: poly 0x1021, no reflection, no final xor."""
    crc = initial & 0xFFFF
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = (crc << 1) ^ CRC16_POLYNOMIAL
            else:
                crc = crc << 1
            crc &= 0xFFFF
    return crc


def checksum16(data: bytes) -> bytes:
    return crc16(data).to_bytes(2, byteorder='big')
