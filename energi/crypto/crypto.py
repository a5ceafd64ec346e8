"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Cryptographic functions.
"""

import hashlib

from base58 import b58decode, b58encode

from energi import EnergiError
from energi.util.encode import ByteArray


HASH_SIZE = 32
RIPEMD160_SIZE = 20
CHECKSUM_SIZE = 4


def sha256(b):
    """
    A single SHA-256 hash.

    Args:
        b (byte-like): The bytes to hash.

    Returns:
        bytes: The 32-byte digest.
    """
    return hashlib.sha256(b).digest()


def hashH(b):
    """
    The double SHA-256 hash as a ByteArray. Transaction ids, block hashes and
    merkle tree nodes are all hashed this way.

    Args:
        b (byte-like): The thing to hash.

    Returns:
        ByteArray: The hash, in internal byte order.
    """
    return ByteArray(sha256(sha256(b)), length=HASH_SIZE)


def checksum(b):
    """
    A checksum.

    Args:
        b (byte-like): Bytes to obtain a checksum for.

    Returns:
        bytes: A 4-byte checksum.
    """
    return sha256(sha256(b))[:CHECKSUM_SIZE]


def b58CheckEncode(version, payload):
    """
    Base-58 encode the payload with the version bytes prepended and a checksum
    appended.

    Args:
        version (byte-like): The version prefix, e.g. an address-type byte.
        payload (byte-like): The data to encode.

    Returns:
        str: The base-58 encoded string.
    """
    b = ByteArray(version)
    b += payload
    b += checksum(b.bytes())
    return b58encode(b.bytes()).decode()


def b58CheckDecode(s, versionLen=1):
    """
    Decode the base-58 encoded string, parsing the version bytes and the
    payload. An exception is raised if the checksum is invalid or missing.

    Args:
        s (str): The base-58 encoded string.
        versionLen (int): The length of the version prefix.

    Returns:
        ByteArray: Decoded bytes minus the leading version and trailing
            checksum.
        bytes: The version bytes.
    """
    try:
        decoded = b58decode(s)
    except ValueError as e:
        raise EnergiError(f"invalid base-58 string {s!r}: {e}")
    if len(decoded) < versionLen + CHECKSUM_SIZE:
        raise EnergiError("decoded lacking version/checksum")
    version = decoded[:versionLen]
    included_cksum = decoded[len(decoded) - CHECKSUM_SIZE :]
    computed_cksum = checksum(decoded[: len(decoded) - CHECKSUM_SIZE])
    if included_cksum != computed_cksum:
        raise EnergiError("checksum error")
    payload = ByteArray(decoded[versionLen : len(decoded) - CHECKSUM_SIZE])
    return payload, version
