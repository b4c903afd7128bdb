import struct
import zlib
from typing import NamedTuple


# chunk na dysku = [4B length][4B type][payload][4B CRC]
# tutaj data = type + payload, length liczy tylko payload
class Chunk(NamedTuple):
    length: int
    data: bytes
    crc: int

    @property
    def type(self) -> bytes:
        return self.data[:4]

    @property
    def payload(self) -> bytes:
        return self.data[4:]

    @property
    def crcOk(self) -> bool:
        # tylko do raportowania, parser niczego nie weryfikuje
        return zlib.crc32(self.data) == self.crc


def packU32(value: int) -> bytes:
    return struct.pack('>I', value)


def unpackU32(raw: bytes) -> int:
    return struct.unpack('>I', raw)[0]


def chunkType(chunk_type) -> bytes:
    chunk_type = chunk_type.encode('ascii') if isinstance(chunk_type, str) else bytes(chunk_type)
    if len(chunk_type) != 4:
        raise ValueError(f"Chunk type must be 4 bytes, got {chunk_type!r}")
    return chunk_type


def chunkCrc(chunk_type: bytes, payload: bytes) -> int:
    # CRC liczony z type + payload, tak jak w PNG
    return zlib.crc32(payload, zlib.crc32(chunk_type))


def makeChunk(chunk_type, payload: bytes) -> Chunk:
    """Builds a new chunk with a freshly computed CRC."""
    chunk_type = chunkType(chunk_type)
    payload = bytes(payload)
    return Chunk(len(payload), chunk_type + payload, chunkCrc(chunk_type, payload))
