# errday/art.py
from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Tuple

from .prng import cell_noise, create_generator, hash_seed

ART_CELLS = 400
PATTERN_MODES = 5
DAILY_COLORS: Tuple[str, ...] = (
    "#ef4444",
    "#f97316",
    "#f59e0b",
    "#84cc16",
    "#10b981",
    "#06b6d4",
    "#3b82f6",
    "#6366f1",
    "#ec4899",
)

SALT_FINE = 1
SALT_CLUSTER = 2
SALT_THRESHOLD = 3


@dataclass(frozen=True)
class ArtParams:
    color_index: int
    pattern_mode: int
    base_density: float
    cluster_size: int
    wave_x: float
    wave_y: float
    phase_x: float
    phase_y: float
    center_x: float
    center_y: float
    radius: float

    @property
    def color(self) -> str:
        return DAILY_COLORS[self.color_index]


@dataclass(frozen=True)
class ArtCell:
    id: str
    x: int
    y: int
    is_painted: bool


@dataclass(frozen=True)
class DailyArt:
    date_key: str
    cells: Tuple[ArtCell, ...]
    color: str
    params: ArtParams

    @property
    def grid_size(self) -> int:
        return math.isqrt(len(self.cells))

    @property
    def painted_count(self) -> int:
        return sum(1 for c in self.cells if c.is_painted)

    def rows(self) -> List[Tuple[bool, ...]]:
        n = self.grid_size
        return [tuple(c.is_painted for c in self.cells[r * n:(r + 1) * n]) for r in range(n)]


def draw_art_params(random: Callable[[], float]) -> ArtParams:
    # Draw order is part of the output contract: each draw feeds exactly one parameter.
    color_index = math.floor(random() * len(DAILY_COLORS))
    pattern_mode = math.floor(random() * PATTERN_MODES)
    base_density = 0.16 + random() * 0.68
    cluster_size = 2 + math.floor(random() * 5)
    wave_x = 0.8 + random() * 3.8
    wave_y = 0.8 + random() * 3.8
    phase_x = random() * math.pi * 2
    phase_y = random() * math.pi * 2
    center_x = random()
    center_y = random()
    radius = 0.35 + random() * 0.45
    return ArtParams(
        color_index=color_index,
        pattern_mode=pattern_mode,
        base_density=base_density,
        cluster_size=cluster_size,
        wave_x=wave_x,
        wave_y=wave_y,
        phase_x=phase_x,
        phase_y=phase_y,
        center_x=center_x,
        center_y=center_y,
        radius=radius,
    )


def blend_intensity(mode: int, *, wave: float, cluster: float, fine: float, radial: float, diagonal: float) -> float:
    if mode == 0:
        return 0.52 * wave + 0.3 * cluster + 0.18 * fine
    if mode == 1:
        return 0.52 * radial + 0.28 * wave + 0.2 * fine
    if mode == 2:
        return 0.5 * diagonal + 0.3 * cluster + 0.2 * fine
    if mode == 3:
        return 0.7 * cluster + 0.3 * fine
    return 0.4 * wave + 0.35 * radial + 0.25 * cluster


def generate_daily_art(date_key: str) -> DailyArt:
    """Render the 20x20 pattern and accent colour for one date key.

    Pure function of `date_key`: the same key always yields the same cells
    and colour. Any non-empty string is accepted; the key is the only seed.
    Anything else raises ValueError.
    """
    if not isinstance(date_key, str) or not date_key:
        raise ValueError(f"date_key must be a non-empty string, got {date_key!r}")
    return _render_daily_art(date_key)


def clear_art_cache() -> None:
    _render_daily_art.cache_clear()


@lru_cache(maxsize=64)
def _render_daily_art(date_key: str) -> DailyArt:
    seed = hash_seed(date_key)
    p = draw_art_params(create_generator(seed))
    grid_size = math.isqrt(ART_CELLS)
    span = grid_size - 1

    cells: List[ArtCell] = []
    for index in range(ART_CELLS):
        x = index % grid_size
        y = index // grid_size
        nx = x / span
        ny = y / span

        fine = cell_noise(seed, x, y, SALT_FINE)
        cluster = cell_noise(seed, x // p.cluster_size, y // p.cluster_size, SALT_CLUSTER)
        wave = (
            math.sin(nx * p.wave_x * math.pi * 2 + p.phase_x)
            + math.cos(ny * p.wave_y * math.pi * 2 + p.phase_y)
            + 2
        ) / 4
        radial = 1 - min(1, math.hypot(nx - p.center_x, ny - p.center_y) / p.radius)
        diagonal = 1 - abs(nx - ny)

        intensity = blend_intensity(
            p.pattern_mode,
            wave=wave,
            cluster=cluster,
            fine=fine,
            radial=radial,
            diagonal=diagonal,
        )
        jitter = 0.86 + cell_noise(seed, x, y, SALT_THRESHOLD) * 0.28
        cells.append(
            ArtCell(
                id=f"{date_key}-{index}",
                x=x,
                y=y,
                is_painted=intensity > p.base_density * jitter,
            )
        )

    return DailyArt(date_key=date_key, cells=tuple(cells), color=p.color, params=p)


__all__ = [
    "ART_CELLS",
    "PATTERN_MODES",
    "DAILY_COLORS",
    "ArtParams",
    "ArtCell",
    "DailyArt",
    "draw_art_params",
    "blend_intensity",
    "generate_daily_art",
    "clear_art_cache",
]
