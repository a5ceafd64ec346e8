"""
Copyright (c) 2018-2020, The Energi Core developers
See LICENSE for details

Genesis block construction.
"""

from energi.util import helpers
from energi.util.encode import ByteArray
from energi.wire import msgblock, msgtx

from . import txscript


log = helpers.getLogger("GENESIS")

# The text committed to in the genesis coinbase.
GenesisTimestamp = "World Power"

# The uncompressed public key paid by every network's genesis coinbase.
GenesisOutputPubKey = (
    "0479619b3615fc9f03aace413b9064dc97d4b6f892ad541e5a2d8a3181517443"
    "840a79517fb1a308e834ac3c53da86de69a9bcce27ae01cf77d9b2b9d7588d122a"
)

# The script number pushed after the bits in the coinbase signature script.
GenesisExtraNonce = 4


def genesisSignatureScript(bits, timestamp):
    """
    The coinbase signature script: the compact bits, the script number 4, and
    the timestamp text.

    Args:
        bits (int): The compact target.
        timestamp (str): The timestamp text.

    Returns:
        ByteArray: The signature script.
    """
    script = txscript.addInt(bits)
    script += txscript.addScriptNum(GenesisExtraNonce)
    script += txscript.addData(ByteArray(timestamp.encode()))
    return script


def createGenesisBlock(timestamp, outputScript, time, nonce, bits, version, reward):
    """
    Build a genesis block. The block has a single coinbase transaction paying
    reward to outputScript, a null previous block and mix hash, and height 0.
    Equal inputs always produce byte-identical blocks.

    Args:
        timestamp (str): The text committed to in the coinbase.
        outputScript (ByteArray): The coinbase output script.
        time (int): The header timestamp.
        nonce (int): The header nonce.
        bits (int): The compact target.
        version (int): The block version.
        reward (int): The coinbase output value.

    Returns:
        MsgBlock: The genesis block.
    """
    coinbase = msgtx.MsgTx(version=1)
    coinbase.addTxIn(
        msgtx.TxIn(
            previousOutPoint=msgtx.OutPoint(
                txHash=ByteArray(0, length=msgtx.HASH_SIZE),
                idx=msgtx.MaxPrevOutIndex,
            ),
            sequence=msgtx.MaxTxInSequenceNum,
            signatureScript=genesisSignatureScript(bits, timestamp),
        )
    )
    coinbase.addTxOut(msgtx.TxOut(value=reward, pkScript=ByteArray(outputScript)))

    header = msgblock.BlockHeader(
        version=version, timestamp=time, bits=bits, height=0, nonce=nonce,
    )
    block = msgblock.MsgBlock(header=header, transactions=[coinbase])
    block.header.merkleRoot, _ = block.merkleRoot()
    log.debug(
        f"built genesis block {block.header.id()} with merkle root"
        f" {block.header.merkleRoot.rhex()}"
    )
    return block


def createDefaultGenesisBlock(time, nonce, bits, version, reward):
    """
    Build the genesis block with the Energi timestamp text, paying to the
    fixed genesis public key.

    Args:
        time (int): The header timestamp.
        nonce (int): The header nonce.
        bits (int): The compact target.
        version (int): The block version.
        reward (int): The coinbase output value.

    Returns:
        MsgBlock: The genesis block.
    """
    outputScript = txscript.payToPubKeyScript(ByteArray(GenesisOutputPubKey))
    return createGenesisBlock(
        GenesisTimestamp, outputScript, time, nonce, bits, version, reward
    )
