import struct
import zlib

import pytest

PngSignature = b'\x89PNG\r\n\x1a\n'

# 1x1 RGBA, 8 bit
IHDR_PAYLOAD = struct.pack('>IIBBBBB', 1, 1, 8, 6, 0, 0, 0)
IDAT_PAYLOAD = zlib.compress(b'\x00\xff\x00\x00\xff')


def rawChunk(chunk_type: bytes, payload: bytes, crc=None) -> bytes:
    # [4B length][4B type][payload][4B CRC]
    if crc is None:
        crc = zlib.crc32(payload, zlib.crc32(chunk_type))
    return struct.pack('>I', len(payload)) + chunk_type + payload + struct.pack('>I', crc)


@pytest.fixture
def raw_chunk():
    return rawChunk


@pytest.fixture
def minimal_png():
    """Signature + IHDR + IDAT + IEND."""
    return (
        PngSignature
        + rawChunk(b'IHDR', IHDR_PAYLOAD)
        + rawChunk(b'IDAT', IDAT_PAYLOAD)
        + rawChunk(b'IEND', b'')
    )


@pytest.fixture
def png_file(tmp_path, minimal_png):
    path = tmp_path / 'input.png'
    path.write_bytes(minimal_png)
    return path
