"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

Compact difficulty targets and the genesis proof-of-work check.
"""

from energi import EnergiError
from energi.util import helpers
from energi.util.encode import ByteArray


log = helpers.getLogger("POW")

# Targets are 256-bit unsigned integers.
TargetBits = 256
MaxTarget = (1 << TargetBits) - 1

# The sign bit of the compact mantissa.
CompactSignBit = 0x00800000
CompactMantissaMask = 0x007FFFFF


class ProofOfWorkError(EnergiError):
    pass


class BelowMinimumWorkError(ProofOfWorkError):
    """
    The target decoded from the compact bits is negative, zero, overflowed, or
    easier than the network's proof-of-work limit.
    """

    pass


class HashExceedsTargetError(ProofOfWorkError):
    """
    The proof-of-work hash is numerically greater than the target.
    """

    pass


def setCompact(bits):
    """
    Decode a compact target. The high byte is the size of the number in bytes
    and the low 23 bits are the most significant bytes of the number. Bit 23 is
    a sign bit.

    Any 32-bit input is accepted. Values that need more than 256 bits are
    flagged as overflowed and the returned target is reduced modulo 2**256.

    Args:
        bits (int): The compact representation.

    Returns:
        int: The target.
        bool: True if the sign bit is set on a nonzero mantissa.
        bool: True if the encoded value does not fit in 256 bits.
    """
    size = bits >> 24
    word = bits & CompactMantissaMask
    if size <= 3:
        word >>= 8 * (3 - size)
        target = word
    else:
        target = (word << 8 * (size - 3)) & MaxTarget
    negative = word != 0 and (bits & CompactSignBit) != 0
    overflow = word != 0 and (
        size > 34 or (word > 0xFF and size > 33) or (word > 0xFFFF and size > 32)
    )
    return target, negative, overflow


def getCompact(target, negative=False):
    """
    Encode a target in the canonical compact form. A mantissa that would have
    its sign bit set is shifted into the next size.

    Args:
        target (int): The 256-bit target.
        negative (bool): Set the sign bit. Ignored for a zero mantissa.

    Returns:
        int: The compact representation.
    """
    size = (target.bit_length() + 7) // 8
    if size <= 3:
        compact = (target << 8 * (3 - size)) & 0xFFFFFFFF
    else:
        compact = (target >> 8 * (size - 3)) & 0xFFFFFFFF
    if compact & CompactSignBit:
        compact >>= 8
        size += 1
    compact |= size << 24
    if negative and (compact & CompactMantissaMask):
        compact |= CompactSignBit
    return compact


def hashToInt(h):
    """
    The unsigned integer value of a hash. Hashes are stored in little-endian
    byte order.

    Args:
        h (ByteArray or int): The hash.

    Returns:
        int: The hash as an integer.
    """
    if isinstance(h, int):
        return h
    return ByteArray(h).littleInt()


def checkGenesisProofOfWork(powHash, bits, powLimit):
    """
    Check that the proof-of-work hash satisfies the compact target, and that
    the target itself is valid for the network.

    Args:
        powHash (ByteArray or int): The proof-of-work hash of the header.
        bits (int): The compact target from the header.
        powLimit (int): The network's easiest allowed target.

    Raises:
        BelowMinimumWorkError: The target is negative, zero, overflowed or
            above powLimit.
        HashExceedsTargetError: The hash is greater than the target.
    """
    target, negative, overflow = setCompact(bits)
    if negative or target == 0 or overflow or target > powLimit:
        raise BelowMinimumWorkError(
            f"invalid target for bits {bits:#010x}: negative={negative},"
            f" overflow={overflow}, target={target:#x}, limit={powLimit:#x}"
        )
    hashNum = hashToInt(powHash)
    if hashNum > target:
        raise HashExceedsTargetError(
            f"hash {hashNum:064x} is higher than target {target:064x}"
        )
    log.debug(f"proof of work satisfied for bits {bits:#010x}")
