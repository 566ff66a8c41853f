"""
Block Blast PIL Renderer for solve plans
Draws the board after each planned placement, with the placed piece and
the filled lines highlighted
"""

from PIL import Image, ImageDraw, ImageFont
from typing import Optional, Sequence, Set, Tuple
from pathlib import Path
import os

import numpy as np

from game.board import GRID_SIZE


def get_font(size: int) -> ImageFont.ImageFont:
    font_paths = [
        "C:/Windows/Fonts/arial.ttf",
        "C:/Windows/Fonts/segoeui.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/System/Library/Fonts/Helvetica.ttc",
    ]
    for path in font_paths:
        if os.path.exists(path):
            try:
                return ImageFont.truetype(path, size)
            except OSError:
                pass
    return ImageFont.load_default()


# Colors
COLORS = {
    'bg': (45, 55, 85),
    'grid_bg': (28, 42, 70),
    'empty_cell': (35, 50, 85),
    'filled_cell': (60, 60, 80),
    'text_white': (255, 255, 255),
    'text_yellow': (255, 220, 80),
    'text_red': (255, 100, 100),
    'highlight_clear': (255, 80, 80),
}

# One color per piece slot (shapeId 1..3)
PIECE_COLORS = [
    (255, 200, 50),
    (170, 120, 230),
    (100, 220, 100),
]


class PlanRenderer:
    """PIL-based renderer for solver frames"""

    def __init__(self, cell_size: int = 50, width: int = 720, height: int = 540):
        self.cell_size = cell_size
        self.width = width
        self.height = height

        self.font_large = get_font(28)
        self.font_small = get_font(16)
        self.font_tiny = get_font(12)

        self.grid_x = 40
        self.grid_y = 70
        self.grid_pixel_size = self.cell_size * GRID_SIZE
        self.info_x = self.grid_x + self.grid_pixel_size + 30

    def render_frame(self, board: np.ndarray,
                     title: str = "",
                     placed: Optional[Set[Tuple[int, int]]] = None,
                     piece: Optional[int] = None,
                     full_rows: Sequence[int] = (),
                     full_cols: Sequence[int] = (),
                     info_lines: Sequence[str] = ()) -> Image.Image:
        """
        Render one board.

        `board` is drawn as is; pass the board before lines were cleared to
        show which lines a placement fills. Cells in `placed` use the color of
        `piece`, cells on a full line are drawn red.
        """
        img = Image.new('RGB', (self.width, self.height), COLORS['bg'])
        draw = ImageDraw.Draw(img)

        draw.text((self.grid_x, 12), title, font=self.font_large,
                  fill=COLORS['text_white'])
        self._draw_grid(draw, board, placed or set(), piece, full_rows, full_cols)
        self._draw_info(draw, info_lines)
        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, board: np.ndarray,
                   placed: Set[Tuple[int, int]], piece: Optional[int],
                   full_rows: Sequence[int], full_cols: Sequence[int]):
        draw.rounded_rectangle(
            [self.grid_x - 5, self.grid_y - 5,
             self.grid_x + self.grid_pixel_size + 5, self.grid_y + self.grid_pixel_size + 5],
            radius=10, fill=COLORS['grid_bg']
        )

        piece_color = PIECE_COLORS[piece % len(PIECE_COLORS)] if piece is not None else None

        for y in range(GRID_SIZE):
            for x in range(GRID_SIZE):
                cx = self.grid_x + x * self.cell_size
                cy = self.grid_y + y * self.cell_size
                cell_rect = [cx + 2, cy + 2, cx + self.cell_size - 2, cy + self.cell_size - 2]

                if board[y, x] == 0:
                    draw.rounded_rectangle(cell_rect, radius=4, fill=COLORS['empty_cell'])
                    continue

                if y in full_rows or x in full_cols:
                    color = COLORS['highlight_clear']
                elif (x, y) in placed and piece_color:
                    color = piece_color
                else:
                    color = COLORS['filled_cell']
                draw.rounded_rectangle(cell_rect, radius=4, fill=color)

                # 3D effect for filled cells
                highlight = tuple(min(255, c + 40) for c in color)
                draw.line([cx + 3, cy + 3, cx + self.cell_size - 4, cy + 3], fill=highlight, width=2)
                draw.line([cx + 3, cy + 3, cx + 3, cy + self.cell_size - 4], fill=highlight, width=2)

        for row in full_rows:
            y_pos = self.grid_y + row * self.cell_size + self.cell_size // 2
            draw.text((self.grid_x - 30, y_pos - 6), f"R{row}",
                      font=self.font_tiny, fill=COLORS['text_red'])

        for col in full_cols:
            x_pos = self.grid_x + col * self.cell_size + self.cell_size // 2
            draw.text((x_pos - 6, self.grid_y + self.grid_pixel_size + 8), f"C{col}",
                      font=self.font_tiny, fill=COLORS['text_red'])

    def _draw_info(self, draw: ImageDraw.ImageDraw, info_lines: Sequence[str]):
        y = self.grid_y
        for line in info_lines:
            color = COLORS['text_yellow'] if 'clear' in line.lower() else COLORS['text_white']
            draw.text((self.info_x, y), line, font=self.font_small, fill=color)
            y += 24

    def save_frame(self, img: Image.Image, path: str):
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        img.save(path)


def render_ansi(board: np.ndarray, placed: Optional[Set[Tuple[int, int]]] = None) -> str:
    """Render as ASCII art for console; placed cells are shown as '#'"""
    placed = placed or set()
    lines = ["+" + "-" * (GRID_SIZE * 2 + 1) + "+"]
    for y in range(GRID_SIZE):
        row = "| "
        for x in range(GRID_SIZE):
            if (x, y) in placed:
                row += "# "
            else:
                row += "█ " if board[y, x] else ". "
        row += "|"
        lines.append(row)
    lines.append("+" + "-" * (GRID_SIZE * 2 + 1) + "+")
    return "\n".join(lines)
