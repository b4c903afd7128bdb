import math
import struct
from typing import NamedTuple

from chunk_codec import Chunk, makeChunk

METERS_PER_INCH = 0.0254
UNIT_UNKNOWN = 0   # tylko proporcje pikseli
UNIT_METER = 1

# pHYs = [4B x_ppu][4B y_ppu][1B unit]
PhysFormat = '>IIB'


class PhysChunk(NamedTuple):
    x: int
    y: int
    unit: int = UNIT_METER


def buildPhysChunk(x: int, y: int, unit: int = UNIT_METER) -> Chunk:
    return makeChunk(b'pHYs', struct.pack(PhysFormat, x, y, unit))


def readPhysChunk(chunk: Chunk) -> PhysChunk:
    if chunk.type != b'pHYs':
        raise ValueError(f"Not a pHYs chunk: {chunk.type!r}")
    return PhysChunk(*struct.unpack(PhysFormat, chunk.payload))


def ppiToPpm(ppi: float) -> int:
    # zaokrąglenie w górę od połowy, round() w Pythonie zaokrągla do parzystej
    return int(math.floor(ppi / METERS_PER_INCH + 0.5))
