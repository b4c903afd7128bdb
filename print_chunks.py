from png_container import Image, PngSignature
from phys_chunk import METERS_PER_INCH, UNIT_METER, readPhysChunk


# wypisuje metadane pojedynczego chunka odczytanego przez readPNG()
# payload interpretujemy tylko dla pHYs, reszta to sam typ i długość
def printChunk(chunk, offset):

    typ = chunk.type.decode('latin-1')  #4 znakowy identyfikator (IHDR, IDAT, …)
    crc_state = 'ok' if chunk.crcOk else 'MISMATCH'

    print(f"{typ} length: {chunk.length}, offset: {offset}, crc: {chunk.crc:08x} ({crc_state})")

    if chunk.type == b'pHYs':
        if chunk.length != 9:
            print(f"  [Malformed pHYs] length={chunk.length}")
            return
        x_ppu, y_ppu, unit = readPhysChunk(chunk)
        unit_descr = 'meter' if unit == UNIT_METER else 'unknown'
        print(f"  x_ppu={x_ppu}\n  y_ppu={y_ppu}\n  unit={unit} ({unit_descr})")
        if unit == UNIT_METER:
            print(f"  dpi={x_ppu * METERS_PER_INCH:.2f}x{y_ppu * METERS_PER_INCH:.2f}")


def printChunks(image: Image):
    offset = len(PngSignature)
    for chunk in image.chunks:
        printChunk(chunk, offset)
        offset += 4 + 4 + chunk.length + 4
    print(f'Bytes behind IEND: {len(image.trailer)}')
