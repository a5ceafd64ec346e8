"""
Copyright (c) 2019, the Decred developers
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details
"""

import pytest

import energi
from energi import genesis, nets
from energi.util import helpers
from energi.util.encode import ByteArray, rba
from energi.wire import msgblock


class RecordedGenesisHasher(msgblock.DoubleSHA256Hasher):
    """
    Stands in for the Energi header hasher, which is not part of the package.
    A genesis header built from a network module's inputs hashes to the
    module's recorded GenesisHash, and its proof-of-work hash is zero. Any
    other header is hashed with double SHA-256.
    """

    def __init__(self, netModules):
        self.recorded = {}
        for m in netModules:
            header = genesis.createDefaultGenesisBlock(
                m.GenesisTime, m.GenesisNonce, m.GenesisBits, m.GenesisVersion,
                m.GenesisReward,
            ).header
            self.recorded[header.serialize().bytes()] = rba(m.GenesisHash)

    def blockHash(self, headerBytes):
        h = self.recorded.get(bytes(headerBytes))
        if h is None:
            return super().blockHash(headerBytes)
        return h.copy()

    def powHash(self, headerBytes):
        if bytes(headerBytes) in self.recorded:
            return ByteArray(0, length=32)
        return super().powHash(headerBytes)


@pytest.fixture(scope="session", autouse=True)
def chainHasher():
    hasher = RecordedGenesisHasher(nets.netModules(enableTestnet60x=True))
    prev = msgblock.setBlockHasher(hasher)
    yield hasher
    msgblock.setBlockHasher(prev)


@pytest.fixture
def sha256dHasher():
    """Hash every header with double SHA-256 for the duration of the test."""
    hasher = msgblock.DoubleSHA256Hasher()
    prev = msgblock.setBlockHasher(hasher)
    yield hasher
    msgblock.setBlockHasher(prev)


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()


@pytest.fixture
def abortHook():
    """
    Replace the process abort with a hook that only records the message.
    energi.fatal then raises FatalError, so fatal conditions can be tested.
    The recorded messages are in the returned list.
    """
    msgs = []

    def hook(msg):
        msgs.append(msg)

    prev = energi.setAbortHook(hook)
    yield msgs
    energi.setAbortHook(prev)


@pytest.fixture
def freshActive(monkeypatch):
    """A new, unselected process-wide active network handle."""
    active = nets.ActiveParams()
    monkeypatch.setattr(nets, "active", active)
    return active


@pytest.fixture
def freshRegistry(monkeypatch):
    """Make the process-wide registry rebuild on next use."""
    monkeypatch.setattr(nets, "_registry", None)
