"""
Copyright (c) 2019, Brian Stafford
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details

Block header and block wire encoding.
"""

from energi import EnergiError
from energi.crypto import crypto
from energi.util.encode import ByteArray

from . import msgtx, wire


# chainhash.HashSize in Go
HASH_SIZE = 32

# version 4 + prevBlock 32 + merkleRoot 32 + time 4 + bits 4 + height 4 +
# hashMix 32 + nonce 8
MaxHeaderSize = 120


class DoubleSHA256Hasher:
    """
    DoubleSHA256Hasher hashes serialized headers with double SHA-256, for both
    the block hash and the proof-of-work hash. It is the default block hasher.
    """

    def blockHash(self, headerBytes):
        return crypto.hashH(bytes(headerBytes))

    def powHash(self, headerBytes):
        return crypto.hashH(bytes(headerBytes))


_blockHasher = DoubleSHA256Hasher()


def setBlockHasher(hasher):
    """
    Install the hasher used by BlockHeader.hash and BlockHeader.powHash. A
    hasher has blockHash and powHash methods, each taking the serialized
    header bytes and returning a 32-byte ByteArray in internal byte order.

    Args:
        hasher (object): The new block hasher.

    Returns:
        object: The previously installed hasher.
    """
    global _blockHasher
    prev = _blockHasher
    _blockHasher = hasher
    return prev


def blockHasher():
    """The installed block hasher."""
    return _blockHasher


class BlockHeader:
    """
    BlockHeader defines information about a block and is used in the block
    (MsgBlock) and headers messages.
    """

    def __init__(
        self,
        version=1,
        prevBlock=None,
        merkleRoot=None,
        timestamp=0,
        bits=0,
        height=0,
        hashMix=None,
        nonce=0,
    ):
        # version of the block.  This is not the same as the protocol version.
        self.version = version  # int32

        # hash of the previous block in the block chain.
        self.prevBlock = prevBlock or ByteArray(0, length=HASH_SIZE)

        # merkle tree reference to hash of all transactions for the block.
        self.merkleRoot = merkleRoot or ByteArray(0, length=HASH_SIZE)

        # time the block was created.
        self.timestamp = timestamp  # uint32

        # difficulty target for the block.
        self.bits = bits  # uint32

        # height is the block height in the block chain.
        self.height = height  # uint32

        # mix digest produced by the proof-of-work hash.
        self.hashMix = hashMix or ByteArray(0, length=HASH_SIZE)

        self.nonce = nonce  # uint64

    @staticmethod
    def btcDecode(b, pver):
        """
        btcDecode decodes b using the wire protocol encoding into a new
        BlockHeader.

        Args:
            b (ByteArray): the bytes to decode.
            pver (int): the protocol version.
        """
        if len(b) < MaxHeaderSize:
            raise EnergiError(
                f"block header requires {MaxHeaderSize} bytes, got {len(b)}"
            )
        bh = BlockHeader()
        bh.version = wire.readInt(b, 4)  # int32
        bh.prevBlock = b.pop(HASH_SIZE)
        bh.merkleRoot = b.pop(HASH_SIZE)
        bh.timestamp = wire.readUint(b, 4)  # uint32
        bh.bits = wire.readUint(b, 4)  # uint32
        bh.height = wire.readUint(b, 4)  # uint32
        bh.hashMix = b.pop(HASH_SIZE)
        bh.nonce = wire.readUint(b, 8)  # uint64
        return bh

    def btcEncode(self, pver):
        """
        Args:
            pver (int): the protocol version.

        Returns:
            ByteArray: The encoded header.
        """
        b = wire.writeInt(self.version, 4)
        b += ByteArray(self.prevBlock, length=HASH_SIZE)
        b += ByteArray(self.merkleRoot, length=HASH_SIZE)
        b += wire.writeUint(self.timestamp, 4)
        b += wire.writeUint(self.bits, 4)
        b += wire.writeUint(self.height, 4)
        b += ByteArray(self.hashMix, length=HASH_SIZE)
        b += wire.writeUint(self.nonce, 8)
        return b

    def serialize(self):
        """
        Serialize the BlockHeader.

        Returns:
            ByteArray: The serialized BlockHeader.
        """
        return self.btcEncode(0)

    @staticmethod
    def deserialize(b):
        """
        Args:
            b (bytes-like): the bytes to deserialize.
        """
        return BlockHeader.btcDecode(ByteArray(b), 0)

    def hash(self):
        """
        hash computes the block identifier hash for the given block header with
        the installed block hasher.
        """
        return ByteArray(_blockHasher.blockHash(self.serialize().bytes()))

    def powHash(self):
        """
        The hash compared against the difficulty target. It can differ from the
        block hash when the installed hasher has its own proof-of-work function.
        """
        return ByteArray(_blockHasher.powHash(self.serialize().bytes()))

    def id(self):
        return self.hash().rhex()


class MsgBlock:
    """
    MsgBlock is a block message, a header and its transactions.
    """

    def __init__(self, header=None, transactions=None):
        self.header = header or BlockHeader()
        self.transactions = transactions or []

    def addTransaction(self, tx):
        """addTransaction adds a transaction to the block."""
        self.transactions.append(tx)

    def merkleRoot(self):
        """
        Compute the merkle root of the block's transactions.

        Returns:
            ByteArray: The merkle root.
            bool: True if the transaction list is mutated, see
                computeMerkleRoot.
        """
        return computeMerkleRoot([tx.hash() for tx in self.transactions])

    def hash(self):
        """The block hash is the header hash."""
        return self.header.hash()

    def serialize(self):
        """
        Serialize the header followed by the transactions.

        Returns:
            ByteArray: The serialized block.
        """
        b = self.header.serialize()
        b += wire.writeVarInt(0, len(self.transactions))
        for tx in self.transactions:
            b += tx.serialize()
        return b

    @staticmethod
    def deserialize(b):
        """
        Args:
            b (bytes-like): the serialized block.

        Returns:
            MsgBlock: The decoded block.
        """
        b = ByteArray(b)
        header = BlockHeader.btcDecode(b, 0)
        count = wire.readVarInt(b, 0)
        maxTxPerBlock = wire.MaxBlockPayload // msgtx.minTxInPayload + 1
        if count > maxTxPerBlock:
            raise EnergiError(
                f"too many transactions to fit into a block"
                f" [count {count}, max {maxTxPerBlock}]"
            )
        return MsgBlock(
            header=header,
            transactions=[msgtx.MsgTx.btcDecode(b, 0) for _ in range(count)],
        )


def computeMerkleRoot(hashes):
    """
    Compute the root of the binary merkle tree over the hashes. Each node is the
    double SHA-256 of the concatenation of its children. A level with an odd
    number of nodes pairs the last node with itself.

    Duplicating the last node means that some distinct transaction lists have
    the same root (CVE-2012-2459). When two real siblings are identical, the
    list is reported as mutated.

    Args:
        hashes (list(ByteArray)): The leaf hashes, in internal byte order.

    Returns:
        ByteArray: The merkle root. A zero hash for an empty list.
        bool: True if a level contained identical sibling nodes.
    """
    if not hashes:
        return ByteArray(0, length=HASH_SIZE), False
    mutated = False
    level = list(hashes)
    while len(level) > 1:
        for pos in range(0, len(level) - 1, 2):
            if level[pos] == level[pos + 1]:
                mutated = True
        if len(level) % 2:
            level.append(level[-1])
        level = [
            crypto.hashH((level[i] + level[i + 1]).bytes())
            for i in range(0, len(level), 2)
        ]
    return level[0], mutated
