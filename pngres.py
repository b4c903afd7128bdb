"""
pngres - sets the physical resolution (pHYs chunk) of a PNG file.

The image data is never decoded; every other chunk and any bytes behind
IEND are written back untouched.

    pngres set-resolution --input in.png --output out.png --ppi 300
    pngres chunks in.png
"""
import sys

import typer

from phys_chunk import UNIT_METER, ppiToPpm
from png_container import loadPNG, savePNG
from png_errors import MissingTargetChunkError, PNGError
from print_chunks import printChunks

EXIT_FAILURE = 1
EXIT_USAGE = 99
MAX_PPM = 0xFFFFFFFF   #pHYs trzyma x/y na 4 bajtach

COMMANDS = ("set-resolution", "chunks", "help", "--help")
USAGE = "Usage: pngres [set-resolution | chunks | help]"

app = typer.Typer(
    help="pngres - set PNG resolution without re-encoding the image",
    no_args_is_help=True,
)


def _fail(message, code=EXIT_FAILURE):
    typer.echo(message, err=True)
    raise typer.Exit(code=code)


@app.command("set-resolution")
def set_resolution(
    input_path: str = typer.Option("", "--input", help="Path for input"),
    output_path: str = typer.Option("", "--output", help="Path for output"),
    ppi: int = typer.Option(0, "--ppi", help="Pixel per inch"),
) -> None:
    """Write a pHYs chunk with the given pixels per inch."""
    if not input_path or not output_path or ppi <= 0:
        _fail(
            "Usage of set-resolution:\n"
            "  --input PATH    Path for input\n"
            "  --output PATH   Path for output\n"
            "  --ppi N         Pixel per inch",
            EXIT_USAGE,
        )

    ppm = ppiToPpm(ppi)
    if ppm > MAX_PPM:
        _fail(f"--ppi {ppi} is too large, pHYs holds at most {MAX_PPM} pixels per meter", EXIT_USAGE)

    try:
        image = loadPNG(input_path)
    except (PNGError, OSError) as e:
        _fail(str(e))

    try:
        image.setPhysChunk(ppm, ppm, UNIT_METER)
    except MissingTargetChunkError as e:
        _fail(f"{input_path}: {e}")

    try:
        savePNG(image, output_path)
    except (PNGError, OSError) as e:
        _fail(str(e))


@app.command("chunks")
def chunks(path: str = typer.Argument(..., help="PNG file to list")) -> None:
    """List the chunks of a PNG file."""
    try:
        image = loadPNG(path)
    except (PNGError, OSError) as e:
        _fail(str(e))
    printChunks(image)


@app.command("help")
def help_() -> None:
    """Show the available commands."""
    typer.echo(USAGE)


def main():
    # brak komendy albo nieznana komenda -> 99, jak w starym narzędziu
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        typer.echo(USAGE, err=True)
        sys.exit(EXIT_USAGE)
    app()


if __name__ == "__main__":
    main()
