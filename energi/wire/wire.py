"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Integer and varint encodings shared by the wire messages.
"""

from energi import EnergiError
from energi.util.encode import ByteArray


# fmt: off
MaxInt32  = (1 << 31) - 1
MinInt32  = -1 << 31
MaxInt64  = (1 << 63) - 1
MinInt64  = -1 << 63
MaxUint16 = (1 << 16) - 1
MaxUint32 = (1 << 32) - 1
MaxUint64 = (1 << 64) - 1
# fmt: on

# No message may be larger than this, whatever its type.
MaxMessagePayload = 32 * 1024 * 1024

# MAX_BLOCK_SIZE
MaxBlockPayload = 2000000

# The newest protocol version the encodings here follow.
ProtocolVersion = 70208

# Varint discriminants, each with the size of the integer that follows and the
# smallest value that may use it. Smaller values have a shorter encoding.
# fmt: off
VarIntForms = (
    # (discriminant, size, min)
    (0xFD, 2, 0xFD),
    (0xFE, 4, MaxUint16 + 1),
    (0xFF, 8, MaxUint32 + 1),
)
# fmt: on


def varIntSerializeSize(i):
    """The number of bytes writeVarInt uses for i."""
    if i < 0xFD:
        return 1
    if i <= MaxUint16:
        return 3
    if i <= MaxUint32:
        return 5
    return 9


def writeVarInt(pver, val):
    """
    Encode val as a varint. Values below 0xFD are a single byte. Larger values
    are a discriminant byte followed by a 2, 4 or 8 byte little-endian integer.

    Args:
        pver (int): The protocol version.
        val (int): The value, at most MaxUint64.

    Returns:
        ByteArray: The encoding.
    """
    if val > MaxUint64:
        raise EnergiError(f"{val} is too large for a varint")
    for disc, size, minVal in reversed(VarIntForms):
        if val >= minVal:
            return ByteArray([disc]) + writeUint(val, size)
    return ByteArray([val])


def readVarInt(b, pver):
    """
    Pop a varint from b. A value encoded with more bytes than it needs is
    rejected.

    Args:
        b (ByteArray): The encoded data.
        pver (int): The protocol version.

    Returns:
        int: The value.
    """
    discriminant = b.pop(1)[0]
    for disc, size, minVal in VarIntForms:
        if discriminant != disc:
            continue
        val = readUint(b, size)
        if val < minVal:
            raise EnergiError(
                f"non-canonical varint: {val} encoded after discriminant"
                f" {disc:#x}, minimum {minVal}"
            )
        return val
    return discriminant


def writeVarBytes(pver, inBytes):
    """The varint length of inBytes followed by inBytes."""
    return writeVarInt(pver, len(inBytes)) + inBytes


def writeInt(val, size):
    """
    Little-endian encoding of a signed integer of the given byte size.

    Args:
        val (int): The value.
        size (int): The encoded length in bytes.

    Returns:
        ByteArray: The encoded integer.
    """
    return ByteArray(val.to_bytes(size, byteorder="little", signed=True))


def readInt(b, size):
    """
    Pop a little-endian signed integer of the given byte size from b.

    Args:
        b (ByteArray): The encoded bytes.
        size (int): The encoded length in bytes.

    Returns:
        int: The decoded integer.
    """
    return int.from_bytes(b.pop(size).bytes(), byteorder="little", signed=True)


def writeUint(val, size):
    """
    Little-endian encoding of an unsigned integer of the given byte size.

    Args:
        val (int): The value.
        size (int): The encoded length in bytes.

    Returns:
        ByteArray: The encoded integer.
    """
    return ByteArray(val.to_bytes(size, byteorder="little"))


def readUint(b, size):
    """Pop a little-endian unsigned integer of the given byte size from b."""
    return b.pop(size).littleInt()
