import io

from chunk_codec import Chunk, packU32, unpackU32
from insert_chunk import setChunkBefore, setPhysChunk
from phys_chunk import UNIT_METER
from png_errors import IncompleteWriteError, PNGError, SignatureError, TruncatedChunkError

#1 stałe specyficzne dla formatu PNG
PngSignature: bytes = b'\x89PNG\r\n\x1a\n'   #8 bajtowy nagłówek PNG


# cały plik: lista chunków w kolejności z dysku + bajty za ostatnim chunkiem
# sygnatury nie trzymamy, dumpPNG dopisuje ją sam
class Image:

    def __init__(self, chunks=None, trailer: bytes = b''):
        self.chunks = list(chunks) if chunks is not None else []
        self.trailer = bytes(trailer)

    def chunkTypes(self):
        return [c.type for c in self.chunks]

    def setChunkBefore(self, chunk: Chunk, anchor_type=b'IDAT') -> int:
        return setChunkBefore(self.chunks, chunk, anchor_type)

    def setPhysChunk(self, x: int, y: int, unit: int = UNIT_METER) -> int:
        return setPhysChunk(self.chunks, x, y, unit)


#2 parser, rozbija bufor na chunki + bajty po IEND
# CRC czytamy, ale nie sprawdzamy, ma przejść bez zmian
def readPNG(data: bytes) -> Image:
    data = bytes(data)

    #walidacja
    if data[:len(PngSignature)] != PngSignature:
        raise SignatureError('Invalid PNG Signature')

    chunks = []
    pos = len(PngSignature)
    end = len(data)

    #petla po chunkach
    while True:
        remaining = end - pos
        if remaining == 0:
            break  #koniec danych bez IEND, to nie błąd
        if remaining < 4:
            raise TruncatedChunkError(f'Broken chunk length at offset {pos}')

        length = unpackU32(data[pos:pos + 4])
        pos += 4

        #4B type + payload + 4B CRC musi się zmieścić w tym, co zostało
        if end - pos < length + 8:
            raise TruncatedChunkError(
                f'Chunk at offset {pos - 4} declares {length} bytes, '
                f'only {end - pos} bytes left'
            )

        chunk_data = data[pos:pos + length + 4]
        pos += length + 4
        chunk_crc = unpackU32(data[pos:pos + 4])
        pos += 4

        chunk = Chunk(length, chunk_data, chunk_crc)
        chunks.append(chunk)
        if chunk.type == b'IEND':
            break  #dalej już tylko ukryte bajty, nawet jeśli wyglądają jak chunki

    return Image(chunks, data[pos:])


def _write(stream, raw: bytes):
    try:
        written = stream.write(raw)
    except OSError as e:
        raise IncompleteWriteError(f'Write failed: {e}') from e
    # None z surowego strumienia = nic nie zapisano
    if written != len(raw):
        raise IncompleteWriteError(f'Short write: {written} of {len(raw)} bytes')


#3 serializer, odwrotność readPNG, bajt w bajt
def dumpPNG(image: Image, stream):
    _write(stream, PngSignature)
    for chunk in image.chunks:
        _write(stream, packU32(chunk.length))
        _write(stream, chunk.data)
        _write(stream, packU32(chunk.crc))
    if image.trailer:
        _write(stream, image.trailer)


def loadFromBytes(data: bytes) -> Image:
    return readPNG(data)


def dumpToBytes(image: Image) -> bytes:
    buf = io.BytesIO()
    dumpPNG(image, buf)
    return buf.getvalue()


def loadPNG(file_path) -> Image:
    with open(file_path, 'rb') as f:
        content = f.read()
    try:
        return readPNG(content)
    except PNGError as e:
        raise type(e)(f'{file_path}: {e}') from e


def savePNG(image: Image, out_path):
    with open(out_path, 'wb') as o:
        dumpPNG(image, o)
        try:
            o.flush()
        except OSError as e:
            raise IncompleteWriteError(f'{out_path}: {e}') from e

    print(f"Saved PNG → {out_path}")
