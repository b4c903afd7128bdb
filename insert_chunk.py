from chunk_codec import Chunk, chunkType
from phys_chunk import UNIT_METER, buildPhysChunk
from png_errors import MissingTargetChunkError


# wstawia new_chunk tak, żeby w liście był dokładnie jeden chunk jego typu:
#   1 jeśli chunk tego typu już jest, podmieniamy go w tym samym miejscu
#     (kolejne duplikaty wylatują), pozycji nie poprawiamy
#   2 jeśli nie ma, wstawiamy tuż przed pierwszym chunkiem anchor_type
#   3 jeśli nie ma ani jednego, ani drugiego -> MissingTargetChunkError, lista bez zmian
# zwraca indeks, pod którym stoi nowy chunk
def setChunkBefore(chunks: list, new_chunk: Chunk, anchor_type=b'IDAT') -> int:
    anchor_type = chunkType(anchor_type)
    target = new_chunk.type

    #1 podmiana istniejącego
    positions = [i for i, c in enumerate(chunks) if c.type == target]
    if positions:
        first = positions[0]
        new_chunks = []
        for i, c in enumerate(chunks):
            if i == first:
                new_chunks.append(new_chunk)
            elif c.type != target:
                new_chunks.append(c)
        # jedno przypisanie, więc nie ma częściowej edycji
        chunks[:] = new_chunks
        return first

    #2 wstawienie przed anchor
    for i, c in enumerate(chunks):
        if c.type == anchor_type:
            chunks.insert(i, new_chunk)
            return i

    #3
    raise MissingTargetChunkError(
        f"{anchor_type.decode('ascii', errors='replace')} chunk not found"
    )


def setPhysChunk(chunks: list, x: int, y: int, unit: int = UNIT_METER) -> int:
    """Puts a single pHYs chunk into `chunks`, before the first IDAT."""
    return setChunkBefore(chunks, buildPhysChunk(x, y, unit), b'IDAT')
