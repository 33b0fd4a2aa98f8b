#!/usr/bin/env python3
"""
Slide Puzzle Viewer — step through the search one expansion at a time

- Keyboard:
    [1]..[9]     -> switch map (bundled maps, sorted by name)
    [D]/[A]      -> select algorithm (Dijkstra / A*)
    [H]          -> toggle A* heuristic (axes / manhattan)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Config:
- ENV: SLIDEPATH_PAD, SLIDEPATH_HEURISTIC, SLIDEPATH_ALGO, SLIDEPATH_MAPS
- CLI: --pad=wall|floor --heuristic=axes|manhattan --algo=astar|dijkstra
"""

import sys, time
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pygame

from slidepath.core.algos import make_algo
from slidepath.core.config import Settings, resolve_settings
from slidepath.core.maps import list_maps, load_map
from slidepath.core.render import path_to_moves
from slidepath.core.types import Cell, Grid, WALL

# ---------- Config ----------
PANEL_W = 420            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 32
FONT_NAME = None  # default pygame font
MAX_MAP_BUTTONS = 9

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
WALL_GRAY   = ( 52, 56, 66)
FLOOR_GRAY  = (200,200,200)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

ALGO_LABELS = {"astar": "A*", "dijkstra": "Dijkstra"}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, settings: Settings, maps: List[Path], map_key: str = "custom"):
        pygame.init()

        self.grid = grid
        self.settings = settings
        self.maps = maps[:MAX_MAP_BUTTONS]
        self.selected_map_key = map_key
        self.heuristic = settings.heuristic
        self.selected_algo = settings.algo

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self._auto_cell_size(grid)
        grid_px_w = GRID_MARGIN*2 + grid.width * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.height* self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 640)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Slide puzzle — {map_key}")

        self.open_set: set = set()
        self.closed_set: set = set()
        self.path: List[Cell] = []
        self.current: Optional[Cell] = None

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self.state = "Idle"
        self._last_step_t = 0.0

        self.algo = make_algo(self.selected_algo, self.heuristic)
        self.algo.init(self.grid)
        self._reset_overlays()

        # buttons after state (layout refreshes their active flags)
        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(8, min(avail_w // self.grid.width, avail_h // self.grid.height)))

        plate_w = self.grid.width  * self.cell_size + 2 * GRID_MARGIN
        plate_h = self.grid.height * self.cell_size + 2 * GRID_MARGIN
        left_x = max(0, min((win_w - (plate_w + PANEL_W)) // 2, win_w - PANEL_W - plate_w))
        top_y  = max(0, (win_h - plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, plate_w, plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(14, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res = self.algo.step()
        for c in res.opened: self.open_set.add(c)
        for c in res.closed:
            self.open_set.discard(c)
            self.closed_set.add(c)
        self.current = res.current
        if res.path is not None: self.path = res.path
        if res.status == "done":
            self.state = "Done"; self.running = False
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        elif res.status in ("running","idle"):
            self.state = "Running" if self.running else "Idle"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif pygame.K_1 <= e.key <= pygame.K_9:
                    idx = e.key - pygame.K_1
                    if idx < len(self.maps):
                        self._switch_map(self.maps[idx])
                elif e.key == pygame.K_d:
                    self._switch_algo("dijkstra")
                elif e.key == pygame.K_a:
                    self._switch_algo("astar")
                elif e.key == pygame.K_h:
                    self._toggle_heuristic()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((max(640, e.w), max(480, e.h)), pygame.RESIZABLE)
                self._layout(*self.screen.get_size())
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _switch_map(self, path: Path):
        try:
            grid = load_map(path, pad=self.settings.pad)
        except (OSError, ValueError) as ex:
            print(f"Failed to load map {path.name}: {ex}")
            return
        self.grid = grid
        self.selected_map_key = path.stem
        pygame.display.set_caption(f"Slide puzzle — {path.stem}")
        self._restart_algo()
        self._layout(*self.screen.get_size())

    def _switch_algo(self, key: str):
        self.selected_algo = key
        self._restart_algo()

    def _toggle_heuristic(self):
        self.heuristic = "axes" if self.heuristic == "manhattan" else "manhattan"
        if self.selected_algo == "astar":
            self._restart_algo()

    def _restart_algo(self):
        self.algo = make_algo(self.selected_algo, self.heuristic)
        self.algo.init(self.grid)
        self.running = False; self.state = "Idle"
        self._reset_overlays()
        self._refresh_active_states()

    def _reset_overlays(self):
        self.open_set = {self.grid.start}
        self.closed_set.clear()
        self.path = []
        self.current = None
        self._last_metrics = {
            "algo": self.algo.name,
            "popped": 0,
            "open_size": 1,
            "closed_count": 0,
            "path_len": 0,
            "total_cost": None,
        }

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self._reset_overlays()
        self._refresh_active_states()

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(top[i] + (bot[i]-top[i]) * t) for i in range(3))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, c: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = c
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        for row in range(self.grid.height):
            for col in range(self.grid.width):
                rect = self._cell_rect((row, col))
                color = WALL_GRAY if self.grid.kind_at((row, col)) == WALL else FLOOR_GRAY
                pygame.draw.rect(self.screen, color, rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        # overlays: closed then open
        for c in self.closed_set:
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(NEON_MAG_A)
            self.screen.blit(s, self._cell_rect(c).topleft)
        for c in self.open_set:
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(NEON_CYAN_A)
            self.screen.blit(s, self._cell_rect(c).topleft)
        if self.current is not None and self.state != "Done":
            pygame.draw.rect(self.screen, ACCENT_GOLD, self._cell_rect(self.current), 2)

        # path: straight segments between slide stops
        if len(self.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.path]
            glow = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
            pygame.draw.lines(glow, (0, 255, 220, 60), False, pts, 7)
            self.screen.blit(glow, (0,0), special_flags=pygame.BLEND_ADD)
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, 4)
            for p in pts[1:-1]:
                pygame.draw.circle(self.screen, NEON_MINT, p, max(3, cs // 8))

        self._draw_badge(self.grid.start,  "S", BLUE)
        self._draw_badge(self.grid.finish, "F", RED)

    def _draw_badge(self, cell: Cell, text: str, color: Tuple[int,int,int]):
        center = self._cell_rect(cell).center
        pygame.draw.circle(self.screen, color, center, max(6, self.cell_size//2 - 3))
        txt = self.font_small.render(text, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 250  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8
        half = (w - 8) // 2

        def add(label, cb, rect, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, pygame.Rect(x, y, w, h), togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step, pygame.Rect(x, y, half, h))
        add("Reset", self._reset, pygame.Rect(x + half + 8, y, half, h)); y += h + gap
        add("Speed -", lambda: self._bump_speed(-1), pygame.Rect(x, y, half, h))
        add("Speed +", lambda: self._bump_speed(+1), pygame.Rect(x + half + 8, y, half, h)); y += h + gap
        add("Algo: Dijkstra", lambda: self._switch_algo("dijkstra"), pygame.Rect(x, y, half, h),
            togglable=True, store_as="btn_algo_d")
        add("Algo: A*", lambda: self._switch_algo("astar"), pygame.Rect(x + half + 8, y, half, h),
            togglable=True, store_as="btn_algo_a"); y += h + gap
        add("Heuristic", self._toggle_heuristic, pygame.Rect(x, y, w, h)); y += h + gap

        self._map_buttons: Dict[str, UIButton] = {}
        for i, p in enumerate(self.maps):
            rect = pygame.Rect(x, y, w, h)
            btn = UIButton(f"Map {i + 1}: {p.stem}", rect, lambda p=p: self._switch_map(p), togglable=True)
            self._buttons.append(btn)
            self._map_buttons[p.stem] = btn
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        if hasattr(self, "btn_algo_d"):
            self.btn_algo_d.set_active(self.selected_algo == "dijkstra")
        if hasattr(self, "btn_algo_a"):
            self.btn_algo_a.set_active(self.selected_algo == "astar")
        for key, btn in getattr(self, "_map_buttons", {}).items():
            btn.set_active(key == self.selected_map_key)

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(60, self.steps_per_sec + dv)))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 230), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        m = self._last_metrics
        line(f"{m.get('algo', ALGO_LABELS[self.selected_algo])} — {self.state}", big=True, color=ACCENT_GOLD)
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Moves: {max(0, m.get('path_len', 0) - 1)}")
        line(f"Map: {self.selected_map_key}")
        line(f"Speed: {self.steps_per_sec} steps/s")
        if self.path:
            moves = path_to_moves(self.path)
            text = " ".join(mv[0] for mv in moves) or "(already at finish)"
            line(text[:40])

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    try:
        settings = resolve_settings(sys.argv[1:])
    except ValueError as ex:
        print(f"Invalid configuration: {ex}")
        sys.exit(2)
    maps = list_maps(settings.maps_dir)
    if not maps:
        print(f"No maps found in {settings.maps_dir}")
        sys.exit(1)
    try:
        grid = load_map(maps[0], pad=settings.pad)
    except (OSError, ValueError) as ex:
        print(f"Failed to load default map: {ex}")
        sys.exit(1)
    Viewer(grid, settings, maps, map_key=maps[0].stem).run()

if __name__ == "__main__":
    main()
