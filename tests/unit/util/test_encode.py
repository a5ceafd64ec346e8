"""
Copyright (c) 2019-2020, The Energi Core developers
See LICENSE for details
"""

import pytest

from energi import EnergiError
from energi.util.encode import ByteArray, decodeBA, intFromBytes, intToBytes, rba


class TestEncode:
    def test_ByteArray(self):
        makeA = lambda: ByteArray([0, 0, 255])
        makeB = lambda: ByteArray([0, 255, 0])
        makeC = lambda: ByteArray([255, 0, 0])
        zero = ByteArray([0, 0, 0])

        zero2 = ByteArray(zero)
        assert zero.b is not zero2.b
        assert zero == zero2

        zero2 = ByteArray(zero, copy=False)
        assert zero.b is zero2.b

        assert makeA() == bytearray([0, 0, 255])
        assert makeA() == "0000ff"
        assert makeA() != makeB()
        assert makeA() != None  # noqa
        assert not (makeA() == None)  # noqa
        assert makeA() != "not hex"

        assert makeA() < makeB()
        assert makeC() > makeB()
        assert makeA() <= makeA()
        assert makeB() >= makeA()

        a = makeA()
        assert a[2] == 255
        assert a[1:] == "00ff"
        assert isinstance(a[1:], ByteArray)

        z = ByteArray(zero)
        z[2] = 255
        assert makeA() == z
        z[0] = "0102"
        assert z == "0102ff"

        with pytest.raises(EnergiError):
            zero[3] = 0
        with pytest.raises(EnergiError):
            zero[2] = "0102"

    def test_length(self):
        assert ByteArray(0, length=4) == "00000000"
        assert ByteArray(0, length=4).iszero()
        assert ByteArray(0x1234, length=4) == "00001234"
        assert ByteArray("ab", length=2) == "00ab"
        assert ByteArray(length=3) == "000000"
        with pytest.raises(EnergiError):
            ByteArray(0x123456, length=2)

    def test_conversions(self):
        a = ByteArray("0102030405")
        assert a.hex() == "0102030405"
        assert a.rhex() == "0504030201"
        assert a.int() == 0x0102030405
        assert a.littleInt() == 0x0504030201
        assert a.bytes() == bytes.fromhex("0102030405")
        assert a.littleEndian() == "0504030201"
        assert reversed(a) == "0504030201"
        assert a == "0102030405"
        assert rba("0102") == "0201"
        assert repr(a) == "ByteArray(0102030405)"
        assert not a.iszero()

        b = a + "06"
        assert b == "010203040506"
        assert a == "0102030405"
        a += ByteArray("07")
        assert a == "010203040507"

        assert a.copy() == a and a.copy() is not a
        assert {a: 1}[ByteArray("010203040507")] == 1

    def test_pop(self):
        a = ByteArray("0102030405")
        assert a.pop(2) == "0102"
        assert a == "030405"
        assert a.pop(3) == "030405"
        assert len(a) == 0
        with pytest.raises(EnergiError):
            a.pop(1)

        # Popping from a view leaves the shared buffer alone.
        buf = bytearray.fromhex("0102")
        view = ByteArray(buf, copy=False)
        view.pop(1)
        assert buf == bytearray.fromhex("0102")

    def test_ints(self):
        assert intToBytes(0) == bytearray()
        assert intToBytes(0x1234) == bytearray([0x12, 0x34])
        assert intToBytes(-1, signed=True) == bytearray([0xFF])
        assert intToBytes(128, signed=True) == bytearray([0x00, 0x80])
        assert intToBytes(-129, signed=True) == bytearray([0xFF, 0x7F])
        assert intFromBytes(b"\x12\x34") == 0x1234
        assert intFromBytes(b"\xff", signed=True) == -1

    def test_decodeBA(self):
        assert decodeBA("0a0b") == bytearray([10, 11])
        assert decodeBA(b"\x01") == bytearray([1])
        assert decodeBA(0) == bytearray([0])
        assert decodeBA(256) == bytearray([1, 0])
        assert decodeBA([1, 2]) == bytearray([1, 2])
        ba = bytearray([1])
        assert decodeBA(ba) is ba
        assert decodeBA(ba, copy=True) is not ba
        with pytest.raises(TypeError):
            decodeBA(1.5)
