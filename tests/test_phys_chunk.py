import zlib

import pytest

from chunk_codec import makeChunk
from phys_chunk import PhysChunk, buildPhysChunk, ppiToPpm, readPhysChunk


def test_build_phys_chunk_layout():
    chunk = buildPhysChunk(2835, 2835, 1)

    assert chunk.type == b'pHYs'
    assert chunk.length == 9
    assert chunk.payload == bytes.fromhex('00000B1300000B1301')
    assert chunk.crc == zlib.crc32(b'pHYs' + chunk.payload)


def test_build_phys_chunk_defaults_to_meters():
    assert buildPhysChunk(1, 2).payload[-1] == 1


def test_read_phys_chunk():
    chunk = buildPhysChunk(3780, 2835, 0)
    assert readPhysChunk(chunk) == PhysChunk(3780, 2835, 0)


def test_read_phys_chunk_rejects_other_types():
    with pytest.raises(ValueError):
        readPhysChunk(makeChunk(b'gAMA', b'\x00\x00\xb1\x8f'))


@pytest.mark.parametrize('ppi, ppm', [
    (72, 2835),
    (96, 3780),
    (300, 11811),
    (1, 39),
])
def test_ppi_to_ppm(ppi, ppm):
    assert ppiToPpm(ppi) == ppm


def test_ppi_to_ppm_rounds_half_up():
    # 0.0127 / 0.0254 == 0.5 exactly
    assert ppiToPpm(0.0127) == 1
