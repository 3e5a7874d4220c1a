# Copyright (c) 2009, Karoly Lorentey  <karoly@lorentey.hu>

"""Integer and byte stream conversions used by the ID3v2 wire format."""

from tagwright.errors import *

class Unsync:
    "Conversion from/to unsynchronized byte sequences."
    @staticmethod
    def gen_decode(iterable):
        "A generator for de-unsynchronizing a byte iterable."
        sync = False
        for b in iterable:
            if sync:
                if b >= 0xE0:
                    raise InvalidSyncSequence("Invalid sync-safe sequence: FF {0:02X}".format(b))
                if b != 0x00:
                    yield b
                sync = False
            else:
                yield b
                sync = (b == 0xFF)
        if sync:
            raise TruncatedSyncSequence("Data ends on an unresolved 0xFF")

    @staticmethod
    def gen_encode(data):
        "A generator for unsynchronizing a byte iterable."
        sync = False
        for b in data:
            if sync and (b == 0x00 or b >= 0xE0):
                yield 0x00 # Insert sync char
            yield b
            sync = (b == 0xFF)
        if sync:
            yield 0x00 # Data ends on 0xFF

    @staticmethod
    def decode(data):
        "Remove unsynchronization bytes from data."
        return bytes(Unsync.gen_decode(data))

    @staticmethod
    def encode(data):
        "Insert unsynchronization bytes into data."
        return bytes(Unsync.gen_encode(data))


class BitPaddedInt(int):
    """An integer stored using only the low `bits` bits of each byte.

    Synchsafe integers in ID3v2 are big-endian 7-bit byte sequences;
    with bits=8 this is a plain big-endian integer of any length.

    >>> BitPaddedInt(b"\\x00\\x00\\x01\\x01")
    129
    >>> BitPaddedInt(b"\\x00\\x00\\x01\\x01", bits=8)
    257
    """
    def __new__(cls, value, bits=7, bigendian=True):
        mask = (1 << bits) - 1
        numeric = 0
        shift = 0
        if isinstance(value, int):
            # Reinterpret the bytes of an integer read as a raw value
            while value > 0:
                numeric += (value & mask) << shift
                value >>= 8
                shift += bits
        elif isinstance(value, (bytes, bytearray)):
            if bigendian:
                value = reversed(value)
            for byte in value:
                numeric += (byte & mask) << shift
                shift += bits
        else:
            raise TypeError("Expected an int or a byte sequence, not {0}"
                            .format(type(value).__name__))
        self = super().__new__(cls, numeric)
        self.bits = bits
        self.bigendian = bigendian
        return self

    def as_bytes(self, width=4, minwidth=4):
        return BitPaddedInt.encode(self, bits=self.bits, bigendian=self.bigendian,
                                   width=width, minwidth=minwidth)

    @staticmethod
    def encode(value, bits=7, bigendian=True, width=4, minwidth=4):
        """Encode a nonnegative integer.

        When width > 0, then len(result) == width, and ValueTooWide is
        raised if value does not fit.  When width == -1, the result grows
        as needed, but is at least minwidth bytes long.
        """
        value = int(value)
        if value < 0:
            raise ValueError("Value is negative")
        mask = (1 << bits) - 1
        data = bytearray()
        if width != -1:
            while value > 0:
                if len(data) >= width:
                    raise ValueTooWide("Value too wide ({0} bytes)".format(width))
                data.append(value & mask)
                value >>= bits
            data.extend(bytes(width - len(data)))
        else:
            # PCNT and POPM use growing integers of at least minwidth bytes
            while value > 0:
                data.append(value & mask)
                value >>= bits
            if len(data) < minwidth:
                data.extend(bytes(minwidth - len(data)))
        if bigendian:
            data.reverse()
        return bytes(data)

    @staticmethod
    def has_valid_padding(value, bits=7):
        "Return True if no byte in value has a bit set above bit (bits - 1)."
        if bits > 8:
            raise ValueError("bits must not exceed 8")
        mask = ((1 << (8 - bits)) - 1) << bits
        if isinstance(value, int):
            while value > 0:
                if value & mask:
                    return False
                value >>= 8
        elif isinstance(value, (bytes, bytearray)):
            for byte in value:
                if byte & mask:
                    return False
        else:
            raise TypeError("Expected an int or a byte sequence, not {0}"
                            .format(type(value).__name__))
        return True
