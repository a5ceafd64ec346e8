"""
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details
"""

import pytest

from energi import EnergiError
from energi.util.encode import ByteArray, rba
from energi.wire import msgblock, msgtx


MainCoinbaseID = "ce737517317ef573bb17f34c49e10fa30357983f29821f129a99fe3cb90e34c4"
RegtestCoinbaseID = "34e077f3b96691e4f1aea04061ead361fc4f5b45250513199f46f352b7e4669e"

RegtestCoinbase = (
    "01000000010000000000000000000000000000000000000000000000000000000000000000"
    "ffffffff1304ffff7f2001040b576f726c6420506f776572ffffffff0100022e1b00000000"
    "43410479619b3615fc9f03aace413b9064dc97d4b6f892ad541e5a2d8a318151744384"
    "0a79517fb1a308e834ac3c53da86de69a9bcce27ae01cf77d9b2b9d7588d122aac00000000"
)


class TestBlockHeader:
    def make_block_header(self):
        bh = msgblock.BlockHeader()
        bh.version = 1
        bh.merkleRoot = rba(RegtestCoinbaseID)
        bh.timestamp = 1524279488
        bh.bits = 0x207FFFFF
        bh.height = 0
        bh.nonce = 12
        encoded = ByteArray(
            "0100000000000000000000000000000000000000000000000000000000000000000000009e"
            "66e4b752f3469f19130525455b4ffc61d3ea6140a0aef1e49166b9f377e034c0a8da5aff"
            "ff7f20000000000000000000000000000000000000000000000000000000000000000000"
            "0000000c00000000000000"
        )
        return bh, encoded

    def test_decode(self, sha256dHasher):
        bh, encoded = self.make_block_header()
        b = bh.serialize()
        assert b == encoded
        assert len(b) == msgblock.MaxHeaderSize
        reBH = msgblock.BlockHeader.deserialize(encoded)
        assert bh.version == reBH.version
        assert bh.prevBlock == reBH.prevBlock
        assert bh.merkleRoot == reBH.merkleRoot
        assert bh.timestamp == reBH.timestamp
        assert bh.bits == reBH.bits
        assert bh.height == reBH.height
        assert bh.hashMix == reBH.hashMix
        assert bh.nonce == reBH.nonce
        assert bh.id() == reBH.id()
        assert (
            bh.id() == "1a0205c133c91e2a3804b95684964794dc2865ba355e8ff4abb2fe62da7e7268"
        )
        assert bh.powHash() == bh.hash()

    def test_block_hasher(self):
        class SplitHasher:
            def blockHash(self, headerBytes):
                return headerBytes[:32]

            def powHash(self, headerBytes):
                return headerBytes[-32:]

        bh, encoded = self.make_block_header()
        prev = msgblock.setBlockHasher(SplitHasher())
        try:
            assert bh.hash() == encoded[:32]
            assert bh.powHash() == encoded[-32:]
            assert bh.id() == encoded[:32].rhex()
            assert msgblock.MsgBlock(header=bh).hash() == encoded[:32]
        finally:
            msgblock.setBlockHasher(prev)
        assert msgblock.blockHasher() is prev

    def test_field_encoding(self):
        bh, _ = self.make_block_header()
        bh.version = -1
        bh.height = 0x01020304
        bh.nonce = 0x0102030405060708
        bh.hashMix = ByteArray("ab" * 32)
        b = bh.serialize()
        assert b[:4] == "ffffffff"
        assert b[76:80] == "04030201"
        assert b[80:112] == "ab" * 32
        assert b[112:] == "0807060504030201"
        reBH = msgblock.BlockHeader.deserialize(b)
        assert reBH.version == -1
        assert reBH.nonce == 0x0102030405060708

    def test_decode_short(self):
        _, encoded = self.make_block_header()
        with pytest.raises(EnergiError):
            msgblock.BlockHeader.deserialize(encoded[:119])


class TestMsgBlock:
    def test_serialize(self):
        tx = msgtx.MsgTx.deserialize(ByteArray(RegtestCoinbase))
        header = msgblock.BlockHeader(
            timestamp=1524279488, bits=0x207FFFFF, nonce=12, version=1
        )
        block = msgblock.MsgBlock(header=header)
        block.addTransaction(tx)
        root, mutated = block.merkleRoot()
        assert root.rhex() == RegtestCoinbaseID
        assert not mutated
        header.merkleRoot = root
        assert block.hash() == header.hash()

        b = block.serialize()
        assert b == header.serialize() + "01" + RegtestCoinbase
        reBlock = msgblock.MsgBlock.deserialize(b)
        assert reBlock.header.id() == header.id()
        assert reBlock.transactions == [tx]

    def test_too_many_transactions(self):
        header = msgblock.BlockHeader()
        b = header.serialize() + "fe" + (10 ** 6).to_bytes(4, "little").hex()
        with pytest.raises(EnergiError):
            msgblock.MsgBlock.deserialize(b)


def test_computeMerkleRoot():
    main = rba(MainCoinbaseID)
    reg = rba(RegtestCoinbaseID)

    root, mutated = msgblock.computeMerkleRoot([])
    assert root.iszero()
    assert not mutated

    root, mutated = msgblock.computeMerkleRoot([main])
    assert root == main
    assert not mutated

    root, mutated = msgblock.computeMerkleRoot([main, reg])
    assert (
        root.rhex() == "f030df03f543b65fd05debec35420ac4cd8f15788d1d90a14340dbc9efebefb4"
    )
    assert not mutated

    # An odd level pairs the last node with itself.
    three = "cabfc80d7d358772561765ae6cbfb1c0086dca01f358f37d8feda37981a3082f"
    root, mutated = msgblock.computeMerkleRoot([main, reg, reg])
    assert root.rhex() == three
    assert not mutated

    # Repeating the last leaf gives the same root, but is flagged.
    root, mutated = msgblock.computeMerkleRoot([main, reg, reg, reg])
    assert root.rhex() == three
    assert mutated

    _, mutated = msgblock.computeMerkleRoot([reg, reg])
    assert mutated
