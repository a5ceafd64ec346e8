"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Transactions in the legacy Bitcoin encoding. Energi has no witness data, so
the serialization hashed for the txid is the whole transaction.
"""

from typing import List, Optional

from energi import EnergiError
from energi.crypto import crypto
from energi.util.encode import ByteArray

from . import wire


HASH_SIZE = 32

TxVersion = 1

MaxTxInSequenceNum = 0xFFFFFFFF

# The null outpoint, referenced by coinbase inputs, has a zero hash and this
# index.
MaxPrevOutIndex = 0xFFFFFFFF

# hash 32 + index 4 + script length varint 1 + sequence 4
minTxInPayload = 9 + HASH_SIZE

# value 8 + script length varint 1
MinTxOutPayload = 9

# Counts above these can't fit in a message, whatever the scripts hold.
maxTxInPerMessage = wire.MaxMessagePayload // minTxInPayload + 1
maxTxOutPerMessage = wire.MaxMessagePayload // MinTxOutPayload + 1


class OutPoint:
    """
    OutPoint references output idx of the transaction with hash txHash.
    """

    def __init__(self, txHash: Optional[ByteArray], idx: int):
        self.hash = txHash if txHash else ByteArray(0, length=HASH_SIZE)
        self.index = idx

    def __eq__(self, other: "OutPoint") -> bool:
        return self.hash == other.hash and self.index == other.index

    def isNull(self) -> bool:
        return self.hash.iszero() and self.index == MaxPrevOutIndex

    def txid(self) -> str:
        return self.hash.rhex()


class TxIn:
    """
    TxIn spends previousOutPoint. A coinbase input carries arbitrary data in
    its signature script instead.
    """

    def __init__(
        self,
        previousOutPoint: OutPoint,
        sequence: int = MaxTxInSequenceNum,
        signatureScript: Optional[ByteArray] = None,
    ):
        self.previousOutPoint = previousOutPoint
        self.sequence = sequence  # uint32
        self.signatureScript = signatureScript or ByteArray()

    def __eq__(self, other: "TxIn") -> bool:
        return (
            self.previousOutPoint == other.previousOutPoint
            and self.sequence == other.sequence
            and self.signatureScript == other.signatureScript
        )

    def serializeSize(self) -> int:
        # outpoint 36 + sequence 4
        return 40 + varBytesSize(self.signatureScript)


class TxOut:
    """
    TxOut pays value atoms to pkScript.
    """

    def __init__(self, value: int = 0, pkScript: Optional[ByteArray] = None):
        self.value = value  # int64
        self.pkScript = pkScript or ByteArray()

    def __eq__(self, other: "TxOut") -> bool:
        return self.value == other.value and self.pkScript == other.pkScript

    def serializeSize(self) -> int:
        return 8 + varBytesSize(self.pkScript)


class MsgTx:
    """
    MsgTx is a transaction. Build one up with addTxIn and addTxOut.
    """

    def __init__(
        self,
        version: int = TxVersion,
        txIn: Optional[List[TxIn]] = None,
        txOut: Optional[List[TxOut]] = None,
        lockTime: int = 0,
    ):
        self.version = version  # int32
        self.txIn = txIn or []
        self.txOut = txOut or []
        self.lockTime = lockTime  # uint32

    def __eq__(self, other: "MsgTx") -> bool:
        return (
            self.version == other.version
            and self.txIn == other.txIn
            and self.txOut == other.txOut
            and self.lockTime == other.lockTime
        )

    def addTxIn(self, ti: TxIn):
        self.txIn.append(ti)

    def addTxOut(self, to: TxOut):
        self.txOut.append(to)

    def isCoinBase(self) -> bool:
        """
        A coinbase transaction has exactly one input, which spends the null
        outpoint.
        """
        return len(self.txIn) == 1 and self.txIn[0].previousOutPoint.isNull()

    def hash(self) -> ByteArray:
        """
        The double SHA-256 of the serialized transaction, in internal byte
        order.
        """
        b = self.serialize()
        if len(b) != self.serializeSize():
            raise EnergiError(
                f"transaction serialized to {len(b)} bytes,"
                f" expected {self.serializeSize()}"
            )
        return crypto.hashH(b.bytes())

    def id(self) -> str:
        """The txid, the hash in display byte order."""
        return self.hash().rhex()

    @staticmethod
    def btcDecode(b: ByteArray, pver: int) -> "MsgTx":
        """
        Pop a transaction from the front of b.

        Args:
            b (ByteArray): The encoded data. The transaction bytes are consumed.
            pver (int): The protocol version.

        Returns:
            MsgTx: The transaction.
        """
        tx = MsgTx(version=wire.readInt(b, 4))
        count = readCount(b, pver, maxTxInPerMessage, "inputs")
        for _ in range(count):
            tx.addTxIn(readTxIn(b, pver, tx.version))
        count = readCount(b, pver, maxTxOutPerMessage, "outputs")
        for _ in range(count):
            tx.addTxOut(readTxOut(b, pver, tx.version))
        tx.lockTime = wire.readUint(b, 4)
        return tx

    @staticmethod
    def deserialize(b):
        return MsgTx.btcDecode(ByteArray(b), 0)

    def btcEncode(self, pver: int) -> ByteArray:
        b = wire.writeInt(self.version, 4)
        b += wire.writeVarInt(pver, len(self.txIn))
        for ti in self.txIn:
            b += writeTxIn(pver, self.version, ti)
        b += wire.writeVarInt(pver, len(self.txOut))
        for to in self.txOut:
            b += writeTxOut(pver, self.version, to)
        return b + wire.writeUint(self.lockTime, 4)

    def serialize(self) -> ByteArray:
        """The storage encoding, which is the same as the wire encoding."""
        return self.btcEncode(0)

    def serializeSize(self) -> int:
        # version 4 + lock time 4
        return (
            8
            + wire.varIntSerializeSize(len(self.txIn))
            + sum(ti.serializeSize() for ti in self.txIn)
            + wire.varIntSerializeSize(len(self.txOut))
            + sum(to.serializeSize() for to in self.txOut)
        )


def varBytesSize(b: ByteArray) -> int:
    """The encoded size of b with its varint length prefix."""
    return wire.varIntSerializeSize(len(b)) + len(b)


def readCount(b: ByteArray, pver: int, maxCount: int, what: str) -> int:
    """
    Read a varint element count, rejecting any count that could not fit in a
    message. The bound keeps a malformed count from exhausting memory.
    """
    count = wire.readVarInt(b, pver)
    if count > maxCount:
        raise EnergiError(
            f"too many transaction {what} to fit in a message"
            f" [count {count}, max {maxCount}]"
        )
    return count


def readOutPoint(b: ByteArray, pver: int, version: int) -> OutPoint:
    txHash = b.pop(HASH_SIZE)
    return OutPoint(txHash=txHash, idx=wire.readUint(b, 4))


def writeOutPoint(pver: int, version: int, op: OutPoint) -> ByteArray:
    return op.hash + wire.writeUint(op.index, 4)


def readScript(b: ByteArray, pver: int, maxAllowed: int, fieldName: str) -> ByteArray:
    """
    Pop a varint length-prefixed script.

    Args:
        b (ByteArray): The encoded data.
        pver (int): The protocol version.
        maxAllowed (int): The largest acceptable script length.
        fieldName (str): The field, for the error message.

    Returns:
        ByteArray: The script.
    """
    count = wire.readVarInt(b, pver)
    if count > maxAllowed:
        raise EnergiError(
            f"{fieldName} is {count} bytes, more than the maximum {maxAllowed}"
        )
    return b.pop(count)


def readTxIn(b: ByteArray, pver: int, version: int) -> TxIn:
    previousOutPoint = readOutPoint(b, pver, version)
    signatureScript = readScript(
        b, pver, wire.MaxMessagePayload, "input signature script"
    )
    return TxIn(
        previousOutPoint=previousOutPoint,
        signatureScript=signatureScript,
        sequence=wire.readUint(b, 4),
    )


def writeTxIn(pver: int, version: int, ti: TxIn) -> ByteArray:
    b = writeOutPoint(pver, version, ti.previousOutPoint)
    b += wire.writeVarBytes(pver, ti.signatureScript)
    return b + wire.writeUint(ti.sequence, 4)


def readTxOut(b: ByteArray, pver: int, version: int) -> TxOut:
    value = wire.readInt(b, 8)
    pkScript = readScript(b, pver, wire.MaxMessagePayload, "output pubkey script")
    return TxOut(value=value, pkScript=pkScript)


def writeTxOut(pver: int, version: int, to: TxOut) -> ByteArray:
    return wire.writeInt(to.value, 8) + wire.writeVarBytes(pver, to.pkScript)
