"""Double-sided street-name sign meshes drawn with a 3x5 pixel font."""

from __future__ import annotations

from .mesh import LitVertex, Mesh

CHAR_WIDTH = 3
CHAR_HEIGHT = 5
PIXEL_SIZE = 0.04  # meters per font pixel
SPACING = 1  # pixels between characters
PADDING = 1  # pixels around the text

SIGN_HEIGHT = (CHAR_HEIGHT + 2 * PADDING) * PIXEL_SIZE

_FRONT_Z = 0.0
_BACK_Z = -0.01
_TEXT_BUMP = 0.003
_BACKGROUND = (0, 80, 40)
_TEXT = (255, 255, 255)

# Each row: bit 2 = left, bit 1 = middle, bit 0 = right; rows top to bottom.
GLYPHS: dict[str, tuple[int, int, int, int, int]] = {
    "A": (0b010, 0b101, 0b111, 0b101, 0b101),
    "B": (0b110, 0b101, 0b110, 0b101, 0b110),
    "C": (0b011, 0b100, 0b100, 0b100, 0b011),
    "D": (0b110, 0b101, 0b101, 0b101, 0b110),
    "E": (0b111, 0b100, 0b110, 0b100, 0b111),
    "F": (0b111, 0b100, 0b110, 0b100, 0b100),
    "G": (0b011, 0b100, 0b101, 0b101, 0b011),
    "H": (0b101, 0b101, 0b111, 0b101, 0b101),
    "I": (0b111, 0b010, 0b010, 0b010, 0b111),
    "J": (0b001, 0b001, 0b001, 0b101, 0b010),
    "K": (0b101, 0b101, 0b110, 0b101, 0b101),
    "L": (0b100, 0b100, 0b100, 0b100, 0b111),
    "M": (0b101, 0b111, 0b111, 0b101, 0b101),
    "N": (0b101, 0b111, 0b101, 0b101, 0b101),
    "O": (0b010, 0b101, 0b101, 0b101, 0b010),
    "P": (0b110, 0b101, 0b110, 0b100, 0b100),
    "Q": (0b010, 0b101, 0b101, 0b110, 0b011),
    "R": (0b110, 0b101, 0b110, 0b101, 0b101),
    "S": (0b011, 0b100, 0b010, 0b001, 0b110),
    "T": (0b111, 0b010, 0b010, 0b010, 0b010),
    "U": (0b101, 0b101, 0b101, 0b101, 0b010),
    "V": (0b101, 0b101, 0b101, 0b010, 0b010),
    "W": (0b101, 0b101, 0b111, 0b111, 0b101),
    "X": (0b101, 0b101, 0b010, 0b101, 0b101),
    "Y": (0b101, 0b101, 0b010, 0b010, 0b010),
    "Z": (0b111, 0b001, 0b010, 0b100, 0b111),
    "0": (0b111, 0b101, 0b101, 0b101, 0b111),
    "1": (0b010, 0b110, 0b010, 0b010, 0b111),
    "2": (0b110, 0b001, 0b010, 0b100, 0b111),
    "3": (0b110, 0b001, 0b010, 0b001, 0b110),
    "4": (0b101, 0b101, 0b111, 0b001, 0b001),
    "5": (0b111, 0b100, 0b110, 0b001, 0b110),
    "6": (0b011, 0b100, 0b111, 0b101, 0b111),
    "7": (0b111, 0b001, 0b010, 0b010, 0b010),
    "8": (0b111, 0b101, 0b010, 0b101, 0b111),
    "9": (0b111, 0b101, 0b111, 0b001, 0b110),
    " ": (0b000, 0b000, 0b000, 0b000, 0b000),
    "-": (0b000, 0b000, 0b111, 0b000, 0b000),
    ".": (0b000, 0b000, 0b000, 0b000, 0b010),
}


def _add_quad(
    mesh: Mesh,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    z: float,
    nz: float,
    color: tuple[int, int, int],
) -> None:
    r, g, b = color
    base = len(mesh.vertices)
    mesh.vertices.extend(
        LitVertex(x, y, z, 0.0, 0.0, nz, r, g, b, 255)
        for x, y in ((x0, y0), (x1, y0), (x1, y1), (x0, y1))
    )
    if nz >= 0:
        mesh.indices.extend((base, base + 1, base + 2, base, base + 2, base + 3))
    else:
        mesh.indices.extend((base, base + 2, base + 1, base, base + 3, base + 2))


def _lit_pixels(glyph: tuple[int, ...]):
    for row, bits in enumerate(glyph):
        for col in range(CHAR_WIDTH):
            if bits & (1 << (CHAR_WIDTH - 1 - col)):
                yield row, col


def new_mesh(text: str) -> tuple[Mesh, float]:
    """Build a sign for ``text``; return the mesh and its width in meters.

    The sign is centred on X with its bottom edge at Y=0 and its front
    facing +Z; the back carries mirrored text so it reads from behind.
    Characters without a glyph leave a blank space.
    """
    text = text.upper() or " "
    n_chars = len(text)

    width_px = n_chars * CHAR_WIDTH + (n_chars - 1) * SPACING + 2 * PADDING
    total_width = width_px * PIXEL_SIZE
    total_height = SIGN_HEIGHT
    half = total_width / 2

    mesh = Mesh()
    _add_quad(mesh, -half, 0.0, half, total_height, _FRONT_Z, 1.0, _BACKGROUND)
    _add_quad(mesh, -half, 0.0, half, total_height, _BACK_Z, -1.0, _BACKGROUND)

    start_x = -half + PADDING * PIXEL_SIZE
    start_y = PADDING * PIXEL_SIZE
    for ci, ch in enumerate(text):
        glyph = GLYPHS.get(ch)
        if glyph is None:
            continue
        char_x = start_x + ci * (CHAR_WIDTH + SPACING) * PIXEL_SIZE
        for row, col in _lit_pixels(glyph):
            pix_y = start_y + (CHAR_HEIGHT - 1 - row) * PIXEL_SIZE
            pix_x = char_x + col * PIXEL_SIZE
            _add_quad(
                mesh,
                pix_x,
                pix_y,
                pix_x + PIXEL_SIZE,
                pix_y + PIXEL_SIZE,
                _FRONT_Z + _TEXT_BUMP,
                1.0,
                _TEXT,
            )
            mir_x = -pix_x - PIXEL_SIZE
            _add_quad(
                mesh,
                mir_x,
                pix_y,
                mir_x + PIXEL_SIZE,
                pix_y + PIXEL_SIZE,
                _BACK_Z - _TEXT_BUMP,
                -1.0,
                _TEXT,
            )

    return mesh, total_width