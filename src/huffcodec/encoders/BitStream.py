from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

CHUNK_SIZE = 8192
MAX_WIDTH = 64


class BitInputStream:
    """Reads bits MSB-first from a binary file object.

    Exhaustion is reported by returning -1 instead of raising, so callers can
    decide whether running out of input is an error.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.bits_read = 0
        self._bits = bitarray(endian="big")
        self._pos = 0

    def _fill(self) -> bool:
        chunk = self.stream.read(CHUNK_SIZE)
        if not chunk:
            return False
        # Drop consumed bits before growing the buffer
        del self._bits[:self._pos]
        self._pos = 0
        self._bits.frombytes(chunk)
        return True

    def read_bits(self, width: int) -> int:
        if width < 0 or width > MAX_WIDTH:
            raise ValueError(f"width must be between 0 and {MAX_WIDTH}, got {width}")
        while len(self._bits) - self._pos < width:
            if not self._fill():
                return -1
        if width == 0:
            return 0
        value = ba2int(self._bits[self._pos:self._pos + width])
        self._pos += width
        self.bits_read += width
        return value

    def read_bit(self) -> int:
        if self._pos >= len(self._bits) and not self._fill():
            return -1
        bit = self._bits[self._pos]
        self._pos += 1
        self.bits_read += 1
        return bit

    def reset(self):
        self.stream.seek(0)
        self._bits = bitarray(endian="big")
        self._pos = 0
        self.bits_read = 0

    def close(self):
        self.stream.close()


class BitOutputStream:
    """Collects bits MSB-first and writes them out as whole bytes."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.bits_written = 0
        self._bits = bitarray(endian="big")
        self._closed = False

    def write_bits(self, width: int, value: int):
        if width < 0 or width > MAX_WIDTH:
            raise ValueError(f"width must be between 0 and {MAX_WIDTH}, got {width}")
        if width == 0:
            return
        self._bits.extend(int2ba(value & ((1 << width) - 1), length=width, endian="big"))
        self.bits_written += width
        if len(self._bits) >= CHUNK_SIZE * 8:
            self.flush()

    def flush(self):
        whole = len(self._bits) - len(self._bits) % 8
        if whole:
            self.stream.write(self._bits[:whole].tobytes())
            del self._bits[:whole]

    def finish(self):
        # tobytes() pads the last partial byte with zero bits
        if len(self._bits):
            self.stream.write(self._bits.tobytes())
            self._bits = bitarray(endian="big")
        self.stream.flush()

    def close(self):
        if self._closed:
            return
        self.finish()
        self.stream.close()
        self._closed = True
