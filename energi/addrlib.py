"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Base-58 payment addresses. The version byte of each address type comes from
the network's base58Prefixes table.
"""

from typing import Union

from energi import EnergiError
from energi.crypto import crypto
from energi.crypto.crypto import RIPEMD160_SIZE
from energi.util.encode import ByteArray


PUBKEY_ADDRESS = "PUBKEY_ADDRESS"
SCRIPT_ADDRESS = "SCRIPT_ADDRESS"
SECRET_KEY = "SECRET_KEY"
EXT_PUBLIC_KEY = "EXT_PUBLIC_KEY"
EXT_SECRET_KEY = "EXT_SECRET_KEY"


class Address:
    """
    The base class of the addresses here. Each is a 20-byte hash that is
    base-58 check encoded behind the network's version prefix for its type.
    Subclasses set prefixType.
    """

    prefixType = None

    def __init__(self, h, netParams):
        """
        Args:
            h (ByteArray): The 20-byte hash.
            netParams (ChainParams): The network the address is for.
        """
        if len(h) != RIPEMD160_SIZE:
            raise EnergiError(
                f"{type(self).__name__} needs a {RIPEMD160_SIZE}-byte hash,"
                f" got {len(h)} bytes"
            )
        self.netName = netParams.name
        self.netID = netParams.base58Prefixes[self.prefixType]
        self.hash160 = ByteArray(h)

    def __eq__(self, a: Union[str, "Address"]) -> bool:
        if isinstance(a, str):
            return a == self.string()
        if type(a) is type(self):
            return a.hash160 == self.hash160 and a.netID == self.netID
        return False

    def __repr__(self):
        return f"{type(self).__name__}({self.string()})"

    def string(self) -> str:
        """
        Returns:
            str: The base-58 encoded address.
        """
        return encodeAddressBase58(self.hash160, self.netID)

    def scriptAddress(self) -> ByteArray:
        """
        The hash as it appears in an output script.

        Returns:
            ByteArray: A copy of the hash.
        """
        return self.hash160.copy()

    def isForNet(self, netParams) -> bool:
        return self.netID == netParams.base58Prefixes[self.prefixType]


class AddressPubKeyHash(Address):
    """A pay-to-pubkey-hash (P2PKH) address."""

    prefixType = PUBKEY_ADDRESS


class AddressScriptHash(Address):
    """
    A pay-to-script-hash (P2SH) address. The main network backbone is paid to
    one of these.
    """

    prefixType = SCRIPT_ADDRESS


def encodeAddressBase58(k, netID):
    """
    Args:
        k (ByteArray): The pubkey or script hash.
        netID (byte-like): The version prefix.

    Returns:
        str: The base-58 check encoding of netID followed by k.
    """
    return crypto.b58CheckEncode(netID, k.bytes())


def decodeAddress(addr: str, netParams) -> Address:
    """
    Decode a base-58 address for the given network. The version prefix picks
    the address type.

    Args:
        addr (str): The base-58 encoded address.
        netParams (ChainParams): The network parameters.

    Returns:
        Address: The decoded address.

    Raises:
        EnergiError: If the encoding or checksum is bad, the hash is not 20
            bytes, or the prefix is not one of the network's address prefixes.
    """
    hash160, netID = crypto.b58CheckDecode(addr)
    if len(hash160) != RIPEMD160_SIZE:
        raise EnergiError(f"address {addr} holds a {len(hash160)}-byte hash")

    matches = [
        cls
        for cls in (AddressPubKeyHash, AddressScriptHash)
        if netID == bytes(netParams.base58Prefixes[cls.prefixType])
    ]
    if len(matches) > 1:
        raise EnergiError(
            f"network {netParams.name} uses prefix {netID.hex()} for more"
            " than one address type"
        )
    if not matches:
        raise EnergiError(f"address {addr} is not for network {netParams.name}")
    return matches[0](hash160, netParams)
