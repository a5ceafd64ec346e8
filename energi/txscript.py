"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Script building for the coinbase and standard output scripts, and enough
parsing to read them back.
"""

from energi import EnergiError
from energi.crypto import crypto, opcode
from energi.util.encode import ByteArray

from . import addrlib


PubKeyBytesLenCompressed = 33
PubKeyBytesLenUncompressed = 65

# OP_DUP OP_HASH160 OP_DATA_20 <hash> OP_EQUALVERIFY OP_CHECKSIG
P2PKHScriptLen = 25
P2PKHPrefix = ByteArray([opcode.OP_DUP, opcode.OP_HASH160, opcode.OP_DATA_20])
P2PKHSuffix = ByteArray([opcode.OP_EQUALVERIFY, opcode.OP_CHECKSIG])

# OP_HASH160 OP_DATA_20 <hash> OP_EQUAL
P2SHScriptLen = 23
P2SHPrefix = ByteArray([opcode.OP_HASH160, opcode.OP_DATA_20])
P2SHSuffix = ByteArray([opcode.OP_EQUAL])


def scriptNumBytes(n):
    """
    The minimal script number encoding of n: little-endian magnitude, with the
    sign in the high bit of the last byte. Zero is empty.

    Args:
        n (int): The integer.

    Returns:
        ByteArray: The encoding.
    """
    if n == 0:
        return ByteArray()
    magnitude = abs(n)
    # One extra bit for the sign.
    size = (magnitude.bit_length() + 8) // 8
    b = bytearray(magnitude.to_bytes(size, byteorder="little"))
    if n < 0:
        b[-1] |= 0x80
    return ByteArray(b, copy=False)


def pushPrefix(dataLen):
    """
    The opcode, and length bytes if any, that push dataLen bytes of data. The
    smallest form that holds dataLen is used.

    Args:
        dataLen (int): The data length. Must be positive.

    Returns:
        ByteArray: The push prefix.
    """
    if dataLen < opcode.OP_PUSHDATA1:
        return ByteArray([dataLen])
    if dataLen <= 0xFF:
        return ByteArray([opcode.OP_PUSHDATA1, dataLen])
    if dataLen <= 0xFFFF:
        return ByteArray([opcode.OP_PUSHDATA2]) + dataLen.to_bytes(2, "little")
    return ByteArray([opcode.OP_PUSHDATA4]) + dataLen.to_bytes(4, "little")


def addData(data):
    """
    A raw push of data. Empty data pushes OP_0. Single bytes are pushed as data
    too, never swapped for a small integer opcode.

    Args:
        data (ByteArray): The data.

    Returns:
        ByteArray: The push.
    """
    if not data:
        return ByteArray([opcode.OP_0])
    return pushPrefix(len(data)) + data


def addInt(val):
    """
    Push an integer. 0, -1 and 1 through 16 are their own opcodes. Other values
    are pushed as script number data.

    Args:
        val (int): The integer.

    Returns:
        ByteArray: The push.
    """
    if val == 0:
        return ByteArray([opcode.OP_0])
    if val == -1 or 1 <= val <= 16:
        return ByteArray([opcode.OP_1 - 1 + val])
    return addData(scriptNumBytes(val))


def addScriptNum(val):
    """
    Push the script number encoding of val as data, even where addInt would use
    an opcode. 4 becomes 0x01 0x04.
    """
    return addData(scriptNumBytes(val))


class ScriptTokenizer:
    """
    ScriptTokenizer walks a script one opcode at a time. Call next until it
    returns False. A parse failure stops the walk and is kept in err.
    """

    def __init__(self, script):
        self.script = ByteArray(script)
        self.offset = 0
        self.op = None
        self.d = ByteArray()
        self.err = None

    def next(self):
        """
        Parse the next opcode and any data it pushes.

        Returns:
            bool: True if an opcode was parsed. False at the end of the script
                or on a parse error.
        """
        if self.done():
            return False
        op = self.script[self.offset]
        rest = self.script[self.offset + 1 :]
        if op > opcode.OP_PUSHDATA4 or op == opcode.OP_0:
            # No data. OP_0, OP_1NEGATE and OP_1 to OP_16 stand for
            # themselves.
            lenSize, dataLen = 0, 0
        elif op < opcode.OP_PUSHDATA1:
            lenSize, dataLen = 0, op
        else:
            lenSize = {
                opcode.OP_PUSHDATA1: 1,
                opcode.OP_PUSHDATA2: 2,
                opcode.OP_PUSHDATA4: 4,
            }[op]
            if len(rest) < lenSize:
                self.err = EnergiError(
                    f"opcode {op:#04x} at {self.offset} needs {lenSize} length"
                    f" bytes, script has {len(rest)}"
                )
                return False
            dataLen = rest[:lenSize].littleInt()
        if len(rest) < lenSize + dataLen:
            self.err = EnergiError(
                f"opcode {op:#04x} at {self.offset} pushes {dataLen} bytes,"
                f" script has {len(rest) - lenSize}"
            )
            return False
        self.op = op
        self.d = rest[lenSize : lenSize + dataLen]
        self.offset += 1 + lenSize + dataLen
        return True

    def done(self):
        return self.err is not None or self.offset >= len(self.script)

    def opcode(self):
        """The most recently parsed opcode, or None."""
        return self.op

    def data(self):
        """The data pushed by the most recently parsed opcode."""
        return self.d


def parsePushes(script):
    """
    The values pushed by a push-only script, such as a coinbase signature
    script. Small integer opcodes give ints. Data pushes give ByteArray.

    Args:
        script (ByteArray): The script.

    Returns:
        list: The pushed values, in order.
    """
    tokenizer = ScriptTokenizer(script)
    pushes = []
    while tokenizer.next():
        op = tokenizer.opcode()
        if op == opcode.OP_0:
            pushes.append(0)
        elif op == opcode.OP_1NEGATE or opcode.OP_1 <= op <= opcode.OP_16:
            pushes.append(op - (opcode.OP_1 - 1))
        elif op <= opcode.OP_PUSHDATA4:
            pushes.append(tokenizer.data())
        else:
            raise EnergiError(f"opcode {op:#04x} is not a push")
    if tokenizer.err:
        raise tokenizer.err
    return pushes


def isStrictPubKeyEncoding(pubKey):
    """
    Whether pubKey is a compressed (0x02 or 0x03 prefix) or uncompressed (0x04
    prefix) public key of the right length.
    """
    if len(pubKey) == PubKeyBytesLenCompressed:
        return pubKey[0] in (0x02, 0x03)
    if len(pubKey) == PubKeyBytesLenUncompressed:
        return pubKey[0] == 0x04
    return False


def payToPubKeyScript(serializedPubKey):
    """
    <pubkey> OP_CHECKSIG. The genesis coinbase pays to one of these.

    Args:
        serializedPubKey (ByteArray): A strictly encoded public key.

    Returns:
        ByteArray: The script.
    """
    if not isStrictPubKeyEncoding(serializedPubKey):
        raise EnergiError(
            f"public key {serializedPubKey.hex()} is not strictly encoded"
        )
    return addData(serializedPubKey) + [opcode.OP_CHECKSIG]


def checkHash160(h, what):
    if len(h) != crypto.RIPEMD160_SIZE:
        raise EnergiError(
            f"{what} is {len(h)} bytes, expected {crypto.RIPEMD160_SIZE}"
        )


def payToPubKeyHashScript(pkHash):
    """
    Args:
        pkHash (ByteArray): The 20-byte public key hash.

    Returns:
        ByteArray: The P2PKH script.
    """
    checkHash160(pkHash, "pubkey hash")
    return P2PKHPrefix + pkHash + P2PKHSuffix


def payToScriptHashScript(scriptHash):
    """
    Args:
        scriptHash (ByteArray): The 20-byte script hash.

    Returns:
        ByteArray: The P2SH script.
    """
    checkHash160(scriptHash, "script hash")
    return P2SHPrefix + scriptHash + P2SHSuffix


def payToAddrScript(addr):
    """
    The output script paying to addr.

    Args:
        addr (Address): A pubkey hash or script hash address.

    Returns:
        ByteArray: The script.
    """
    if isinstance(addr, addrlib.AddressPubKeyHash):
        return payToPubKeyHashScript(addr.scriptAddress())
    if isinstance(addr, addrlib.AddressScriptHash):
        return payToScriptHashScript(addr.scriptAddress())
    raise NotImplementedError(f"no payment script for {type(addr).__name__}")


def isPubKeyHashScript(script):
    return (
        len(script) == P2PKHScriptLen
        and script[:3] == P2PKHPrefix
        and script[23:] == P2PKHSuffix
    )


def isScriptHashScript(script):
    return (
        len(script) == P2SHScriptLen
        and script[:2] == P2SHPrefix
        and script[22:] == P2SHSuffix
    )


def extractPkScriptAddr(pkScript, netParams):
    """
    The address paid by a P2PKH or P2SH output script.

    Args:
        pkScript (ByteArray): The output script.
        netParams (ChainParams): The network the address is for.

    Returns:
        Address: The address, or None for any other script type.
    """
    if isPubKeyHashScript(pkScript):
        return addrlib.AddressPubKeyHash(pkScript[3:23], netParams)
    if isScriptHashScript(pkScript):
        return addrlib.AddressScriptHash(pkScript[2:22], netParams)
    return None
