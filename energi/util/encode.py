"""
Copyright (c) 2020, Brian Stafford
Copyright (c) 2020, The Energi Core developers
See LICENSE for details

ByteArray, the byte buffer used for hashes, scripts and wire data.
"""

from energi import EnergiError


def intToBytes(i, signed=False):
    """
    The shortest big-endian encoding of i. Zero encodes to no bytes.

    Args:
        i (int): The integer.
        signed (bool): Use a two's complement encoding.

    Returns:
        bytearray: The encoded integer.
    """
    length = ((i + ((i * signed) < 0)).bit_length() + 7 + signed) // 8
    return bytearray(i.to_bytes(length, byteorder="big", signed=signed))


def intFromBytes(b, signed=False):
    """
    Args:
        b (bytes-like): A big-endian encoded integer.
        signed (bool): The encoding is two's complement.

    Returns:
        int: The integer.
    """
    return int.from_bytes(b, "big", signed=signed)


def decodeBA(b, copy=False):
    """
    Convert b to a bytearray. Strings are hex. An int becomes its shortest
    big-endian encoding, with zero as a single zero byte.

    Args:
        b (str, bytes-like, ByteArray, int, list(int)): The value.
        copy (bool): Copy a bytearray or ByteArray rather than sharing it.

    Returns:
        bytearray: The bytes.
    """
    if isinstance(b, ByteArray):
        return bytearray(b.b) if copy else b.b
    if isinstance(b, bytearray):
        return bytearray(b) if copy else b
    if isinstance(b, (bytes, memoryview)):
        return bytearray(b)
    if isinstance(b, int):
        return intToBytes(b) if b else bytearray(1)
    if isinstance(b, str):
        return bytearray.fromhex(b)
    if hasattr(b, "__iter__"):
        return bytearray(b)
    raise TypeError(f"cannot decode {type(b).__name__} to bytes")


class ByteArray:
    """
    ByteArray wraps a bytearray. Arguments to its operators and comparisons go
    through decodeBA, so a ByteArray compares equal to its hex string.

    Unlike bytearray, ByteArray(n) for an int n holds the encoding of n, not n
    zero bytes. ByteArray(n, length=k) zero-pads that encoding on the left to k
    bytes, so ByteArray(0, length=32) is a zero hash.
    """

    def __init__(self, b=b"", copy=True, length=None):
        """
        Args:
            b: Anything decodeBA accepts.
            copy (bool): When False, share the memory of a bytearray or
                ByteArray argument.
            length (int): Left-pad with zeros to this many bytes.
        """
        if length:
            b = decodeBA(b)
            if len(b) > length:
                raise EnergiError(f"{len(b)} bytes do not fit in {length}")
            self.b = bytearray(length - len(b)) + b
        else:
            self.b = decodeBA(b, copy=copy)

    def __eq__(self, a):
        try:
            return self.b == decodeBA(a)
        except (TypeError, ValueError):
            return False

    def __ne__(self, a):
        return not self.__eq__(a)

    def __lt__(self, a):
        return self.b < decodeBA(a)

    def __le__(self, a):
        return self.b <= decodeBA(a)

    def __gt__(self, a):
        return self.b > decodeBA(a)

    def __ge__(self, a):
        return self.b >= decodeBA(a)

    def __hash__(self):
        return hash(bytes(self.b))

    def __repr__(self):
        return f"ByteArray({self.hex()})"

    def __len__(self):
        return len(self.b)

    def __add__(self, a):
        """Concatenation. Returns a new ByteArray."""
        return ByteArray(self.b + decodeBA(a), copy=False)

    __iadd__ = __add__

    def __getitem__(self, k):
        if isinstance(k, slice):
            return ByteArray(self.b[k], copy=False)
        return self.b[k]

    def __setitem__(self, i, v):
        """Overwrite bytes starting at index i. The length never changes."""
        v = decodeBA(v)
        if i + len(v) > len(self.b):
            raise EnergiError(
                f"cannot write {len(v)} bytes at {i} of {len(self.b)}"
            )
        self.b[i : i + len(v)] = v

    def __reversed__(self):
        return ByteArray(self.b[::-1], copy=False)

    def hex(self):
        return self.b.hex()

    def rhex(self):
        """
        The hex of the reversed bytes. Hashes are displayed this way.

        Returns:
            str: The hex string.
        """
        return self.b[::-1].hex()

    def iszero(self):
        return not any(self.b)

    def int(self):
        """The bytes as a big-endian unsigned integer."""
        return intFromBytes(self.b)

    def littleInt(self):
        """The bytes as a little-endian unsigned integer."""
        return int.from_bytes(self.b, "little")

    def bytes(self):
        return bytes(self.b)

    def littleEndian(self):
        """A reversed copy."""
        return reversed(self)

    def copy(self):
        return ByteArray(self.b)

    def pop(self, n):
        """
        Remove and return the first n bytes. Used to consume encoded data from
        the front.

        Args:
            n (int): The number of bytes.

        Returns:
            ByteArray: The removed bytes.
        """
        if n > len(self.b):
            raise EnergiError(f"cannot pop {n} bytes from {len(self.b)}")
        head = ByteArray(self.b[:n], copy=False)
        self.b = self.b[n:]
        return head


def rba(*a, **k):
    """
    A reversed ByteArray. Takes the ByteArray constructor arguments. rba(h)
    turns a hash in display order into internal byte order.
    """
    return reversed(ByteArray(*a, **k))
