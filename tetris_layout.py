"""Window geometry: board on the left, info panel on the right"""
from dataclasses import dataclass
from tetris_config import CONFIG

MARGIN = 16
PANEL_W = 240


@dataclass(frozen=True)
class Dims:
    cols: int
    rows: int
    cell: int

    @property
    def board_x(self) -> int:
        return MARGIN

    @property
    def board_y(self) -> int:
        return MARGIN

    @property
    def board_w(self) -> int:
        return self.cols * self.cell

    @property
    def board_h(self) -> int:
        return self.rows * self.cell

    @property
    def panel_x(self) -> int:
        return self.board_x + self.board_w + MARGIN

    @property
    def panel_y(self) -> int:
        return MARGIN

    @property
    def panel_w(self) -> int:
        return PANEL_W

    @property
    def total_w(self) -> int:
        return self.panel_x + PANEL_W + MARGIN

    @property
    def total_h(self) -> int:
        return self.board_h + 2 * MARGIN


def compute_dims(cols: int, rows: int) -> Dims:
    return Dims(cols, rows, int(CONFIG["CELL_SIZE"]))
