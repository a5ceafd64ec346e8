"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details
"""

from energi import genesis, pow, txscript
from energi.nets import mainnet, regtest, testnet, testnet60x
from energi.util.encode import ByteArray


RegtestSigScript = "04ffff7f2001040b576f726c6420506f776572"

RegtestCoinbase = (
    "01000000010000000000000000000000000000000000000000000000000000000000000000"
    "ffffffff1304ffff7f2001040b576f726c6420506f776572ffffffff0100022e1b00000000"
    "43410479619b3615fc9f03aace413b9064dc97d4b6f892ad541e5a2d8a318151744384"
    "0a79517fb1a308e834ac3c53da86de69a9bcce27ae01cf77d9b2b9d7588d122aac00000000"
)

RegtestHeader = (
    "0100000000000000000000000000000000000000000000000000000000000000000000009e"
    "66e4b752f3469f19130525455b4ffc61d3ea6140a0aef1e49166b9f377e0348118cd5aff"
    "ff7f20000000000000000000000000000000000000000000000000000000000000000000"
    "0000000500000000000000"
)

# Genesis inputs mined against double SHA-256 for both hashes. These check the
# whole construction with a hasher the package ships.
# (module, time, nonce, block hash)
Sha256dGenesis = [
    (
        mainnet,
        1523387128,
        804909,
        "00000861bc9e827f4aad493840a378ce33dec05f5def0b53ff1b831a9eb8327a",
    ),
    (
        testnet,
        1523388977,
        1021658,
        "000002f75d5ffa433ef783dfce4f9f0132ebe8656587ac593a385662231b86f4",
    ),
    (
        testnet60x,
        1523394408,
        216121,
        "00000a5504249a8dd5cbd420bdcf0960cdbe5530a0243890c24a575764e4e003",
    ),
    (
        regtest,
        1524279488,
        12,
        "1a0205c133c91e2a3804b95684964794dc2865ba355e8ff4abb2fe62da7e7268",
    ),
]


def regtestGenesis():
    return genesis.createDefaultGenesisBlock(
        regtest.GenesisTime,
        regtest.GenesisNonce,
        regtest.GenesisBits,
        regtest.GenesisVersion,
        regtest.GenesisReward,
    )


def test_signature_script():
    assert genesis.genesisSignatureScript(0x207FFFFF, "World Power") == RegtestSigScript
    mainScript = genesis.genesisSignatureScript(0x1E0FFFF0, genesis.GenesisTimestamp)
    assert mainScript == "04f0ff0f1e01040b576f726c6420506f776572"


def test_regtest_genesis():
    block = regtestGenesis()
    assert len(block.transactions) == 1
    coinbase = block.transactions[0]
    assert coinbase.isCoinBase()
    assert coinbase.version == 1
    assert coinbase.lockTime == 0
    assert coinbase.txIn[0].sequence == 0xFFFFFFFF
    assert coinbase.txOut[0].value == 456000000
    assert coinbase.serialize() == RegtestCoinbase
    assert coinbase.id() == regtest.GenesisMerkleRoot

    header = block.header
    assert header.serialize() == RegtestHeader
    assert len(header.serialize()) == 120
    assert header.prevBlock.iszero()
    assert header.hashMix.iszero()
    assert header.height == 0
    assert header.merkleRoot.rhex() == regtest.GenesisMerkleRoot
    assert header.id() == regtest.GenesisHash


def test_network_genesis_blocks():
    for net in (mainnet, testnet, testnet60x, regtest):
        block = genesis.createDefaultGenesisBlock(
            net.GenesisTime,
            net.GenesisNonce,
            net.GenesisBits,
            net.GenesisVersion,
            net.GenesisReward,
        )
        assert block.header.merkleRoot.rhex() == net.GenesisMerkleRoot, net.Name
        assert block.header.id() == net.GenesisHash, net.Name
        pow.checkGenesisProofOfWork(
            block.header.powHash(), block.header.bits, net.PowLimit
        )


def test_deterministic():
    a = regtestGenesis()
    b = regtestGenesis()
    assert a.serialize() == b.serialize()
    assert a is not b


def test_inputs_change_block():
    base = regtestGenesis()

    otherTime = genesis.createDefaultGenesisBlock(
        regtest.GenesisTime + 1,
        regtest.GenesisNonce,
        regtest.GenesisBits,
        1,
        regtest.GenesisReward,
    )
    # The time is only in the header.
    assert otherTime.header.merkleRoot == base.header.merkleRoot
    assert otherTime.header.id() != base.header.id()

    # The reward is in the coinbase, so the merkle root changes.
    otherReward = genesis.createDefaultGenesisBlock(
        regtest.GenesisTime,
        regtest.GenesisNonce,
        regtest.GenesisBits,
        1,
        regtest.GenesisReward + 1,
    )
    assert otherReward.header.merkleRoot != base.header.merkleRoot


def test_createGenesisBlock():
    script = txscript.payToPubKeyHashScript(ByteArray(0, length=20))
    block = genesis.createGenesisBlock("hello", script, 1, 2, 0x207FFFFF, 4, 50)
    tx = block.transactions[0]
    assert tx.txOut[0].pkScript == script
    assert tx.txOut[0].value == 50
    assert tx.txIn[0].signatureScript == "04ffff7f200104" + "05" + b"hello".hex()
    assert block.header.version == 4
    assert block.header.timestamp == 1
    assert block.header.nonce == 2
    assert block.header.merkleRoot == tx.hash()


def test_signature_script_pushes():
    block = regtestGenesis()
    sigScript = block.transactions[0].txIn[0].signatureScript
    bits, extraNonce, message = txscript.parsePushes(sigScript)
    assert bits.littleInt() == regtest.GenesisBits
    assert extraNonce == "04"
    assert message.bytes().decode() == genesis.GenesisTimestamp


def test_sha256d_genesis_blocks(sha256dHasher):
    for net, time, nonce, blockHash in Sha256dGenesis:
        header = genesis.createDefaultGenesisBlock(
            time, nonce, net.GenesisBits, net.GenesisVersion, net.GenesisReward
        ).header
        assert header.merkleRoot.rhex() == net.GenesisMerkleRoot, net.Name
        assert header.id() == blockHash, net.Name
        assert header.powHash() == header.hash()
        pow.checkGenesisProofOfWork(header.powHash(), header.bits, net.PowLimit)


def test_recorded_hashes_need_chain_hasher(sha256dHasher):
    # Double SHA-256 of the recorded genesis headers is not the recorded hash.
    for net in (mainnet, testnet, testnet60x, regtest):
        header = genesis.createDefaultGenesisBlock(
            net.GenesisTime,
            net.GenesisNonce,
            net.GenesisBits,
            net.GenesisVersion,
            net.GenesisReward,
        ).header
        assert header.merkleRoot.rhex() == net.GenesisMerkleRoot, net.Name
        assert header.id() != net.GenesisHash, net.Name


def test_regtest_later_genesis(sha256dHasher):
    """
    A later regtest genesis uses time 1524279488 and nonce 12. The coinbase is
    unchanged, so the merkle root is too. Its published block hash,
    378abe3d...5b293ea7, is an Energi header hasher value, and double SHA-256
    of the header does not give it.
    """
    header = genesis.createDefaultGenesisBlock(
        1524279488, 12, 0x207FFFFF, 1, regtest.GenesisReward
    ).header
    assert header.merkleRoot.rhex() == regtest.GenesisMerkleRoot
    assert header.merkleRoot.rhex().startswith("34e077f3")
    assert header.merkleRoot.rhex().endswith("7e4669e")
    blockHash = header.id()
    assert blockHash == "1a0205c133c91e2a3804b95684964794dc2865ba355e8ff4abb2fe62da7e7268"
    assert not blockHash.startswith("378abe3d")
    assert not blockHash.endswith("5b293ea7")
