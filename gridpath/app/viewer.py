# gridpath/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer — Minimal Controls + Metrics

- Keyboard:
    [1]..[6]     -> select algorithm (DFS / BFS / BFS bidirectional / Dijkstra / A* / A*+Dijkstra)
    [H]          -> cycle A* heuristic
    [SPACE]      -> run/pause
    [N]          -> single search step
    [R]          -> restart search from the start cell
    [G]          -> generate a new board (seed + 1)
    [M]          -> toggle manual control (arrows / WASD move)
    [+]/[-]      -> search steps/sec
    [Q]/[ESC]    -> quit

Settings come from gridpath.app.settings (env vars GRIDPATH_* or --key=value).
"""

# --- bootstrap import path so `from gridpath...` works when run as a script ---
import sys
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# ------------------------------------------------------------------------------

import logging
import random
from typing import Dict, List, Optional, Tuple

import pygame

from gridpath.app.agent import Agent
from gridpath.app.settings import Settings, resolve_settings
from gridpath.core.algorithms import Algorithm, create_pathfinder
from gridpath.core.board import Board
from gridpath.core.errors import GridPathError, StartOnWallError
from gridpath.core.heuristics import HeuristicType
from gridpath.core.maps import load_map
from gridpath.core.types import CellKind, Coord, Direction, SearchState, StepResult

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 48
MAX_REGENERATE_TRIES = 20   # seeds tried by [G] before giving up
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
FLOOR_GRAY  = (122,122,122)
WALL_DARK   = ( 40, 40, 46)
SEARCHING_A = (184,255,184,150)   # cell entered the search
SELECTED_A  = (255,255,184,200)   # cell is on the final path
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

ALGO_KEYS = {
    pygame.K_1: Algorithm.DFS,
    pygame.K_2: Algorithm.BFS,
    pygame.K_3: Algorithm.BIDIRECTIONAL_BFS,
    pygame.K_4: Algorithm.DIJKSTRA,
    pygame.K_5: Algorithm.ASTAR,
    pygame.K_6: Algorithm.ASTAR_DIJKSTRA,
}

MOVE_KEYS = {
    pygame.K_UP: Direction.UP, pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN, pygame.K_s: Direction.DOWN,
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT, pygame.K_a: Direction.LEFT,
}


# ---------- Board loading ----------
def build_board(settings: Settings, seed: int) -> Tuple[Board, Coord]:
    if settings.map_path:
        board, start = load_map(settings.map_path)
        return board, start.position
    board = Board(settings.columns, settings.rows, random.Random())
    board.setup(seed, settings.wall_range)
    return board, settings.start


def find_next_board(settings: Settings, seed: int,
                    tries: int = MAX_REGENERATE_TRIES) -> Optional[Tuple[Board, Coord, int]]:
    """Try the seeds after `seed` until the start lands on floor. None when all fail."""
    for candidate in range(seed + 1, seed + 1 + tries):
        try:
            board, start = build_board(settings, candidate)
            if board.cell_at(start).is_wall:
                raise StartOnWallError(f"start {start} is a wall")
        except GridPathError as ex:
            print(f"Seed {candidate}: {ex}")
            continue
        return board, start, candidate
    return None


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
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

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
    def __init__(self, settings: Settings):
        pygame.init()

        self.settings = settings
        self.seed = settings.seed
        self.selected_algo = settings.algorithm
        self.heuristic = settings.heuristic
        self.board, self.start = build_board(settings, self.seed)

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = CELL_SIZE_DEFAULT
        grid_px_w = GRID_MARGIN*2 + self.board.num_columns * self.cell_size
        grid_px_h = GRID_MARGIN*2 + self.board.num_rows * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 560)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("gridpath")

        self.running = False
        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.clock = pygame.time.Clock()
        self.state = "Idle"
        self._last_metrics: Dict[str, object] = {}
        self._make_agent()

    # ---------- world ----------
    def _make_agent(self):
        pathfinder = create_pathfinder(self.selected_algo, heuristic=self.heuristic)
        self.agent = Agent(self.board, pathfinder, self.start,
                           delay=self.settings.path_generation_delay,
                           speed=self.settings.movement_speed,
                           keyboard_control=self.settings.keyboard_control)
        self.agent.init()
        self._last_metrics = {"algo": pathfinder.name}
        self.running = False
        self.state = "Idle"
        self._refresh_active_states()

    @property
    def pathfinder(self):
        return self.agent.pathfinder

    def _switch_algo(self, algo: Algorithm):
        self.selected_algo = algo
        self._make_agent()

    def _cycle_heuristic(self):
        kinds = list(HeuristicType)
        self.heuristic = kinds[(kinds.index(self.heuristic) + 1) % len(kinds)]
        self._make_agent()

    def _regenerate(self):
        if self.settings.map_path:
            return
        found = find_next_board(self.settings, self.seed)
        if found is None:
            print(f"No usable board after {MAX_REGENERATE_TRIES} seeds, keeping the current one")
            return
        self.board, self.start, self.seed = found
        self._make_agent()
        self._layout(*self.screen.get_size())

    def _reset(self):
        self.agent.init()
        self.running = False
        self.state = "Idle"
        self._refresh_active_states()

    def _toggle_manual(self):
        self.agent.set_manual_control(not self.agent.keyboard_control)
        self.state = "Manual" if self.agent.keyboard_control else "Idle"
        self._refresh_active_states()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(8, min(avail_w // self.board.num_columns,
                                        avail_h // self.board.num_rows)))

        grid_plate_w = self.board.num_columns * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.board.num_rows * self.cell_size + 2 * GRID_MARGIN
        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        top_y = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN, self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def _cell_rect(self, col: float, row: float) -> pygame.Rect:
        # row 0 is the bottom row of the board
        cs = self.cell_size
        ox, oy = self._grid_origin
        return pygame.Rect(int(ox + col*cs), int(oy + (self.board.num_rows - 1 - row)*cs), cs, cs)

    # ---------- loop ----------
    def run(self):
        while True:
            dt = self.clock.tick(60) / 1000.0
            self._handle_events()
            if self.running or self.agent.keyboard_control:
                self._tick(dt)
            self._draw()

    def _held_direction(self) -> Optional[Direction]:
        pressed = pygame.key.get_pressed()
        for key, direction in MOVE_KEYS.items():
            if pressed[key]:
                return direction
        return None

    def _tick(self, dt: float):
        key_dir = self._held_direction() if self.agent.keyboard_control else None
        res = self.agent.update(dt, key_dir)
        if res is not None:
            self._apply(res)
        if self.agent.reached_goal():
            self.state = "Goal reached"
            self.running = False
            self._refresh_active_states()

    def _do_step(self):
        if self.agent.keyboard_control:
            return
        self._apply(self.pathfinder.advance(self.board))

    def _apply(self, res: StepResult):
        if res.status == "done":
            self.state = "Done"
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        elif res.status == "running":
            self.state = "Running" if self.running else "Paused"
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
                elif e.key == pygame.K_g:
                    self._regenerate()
                elif e.key == pygame.K_m:
                    self._toggle_manual()
                elif e.key == pygame.K_h:
                    self._cycle_heuristic()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
                elif e.key in ALGO_KEYS and not self.agent.keyboard_control:
                    self._switch_algo(ALGO_KEYS[e.key])
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _toggle_run(self):
        if self.state in ("No path", "Goal reached") or self.agent.keyboard_control:
            return
        self.running = not self.running
        if self.pathfinder.state is SearchState.RUNNING:
            self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        steps = 1.0 / self.agent.delay if self.agent.delay > 0 else 60.0
        steps = max(1.0, min(60.0, round(steps) + dv))
        self.agent.delay = 1.0 / steps

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
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _overlay(self, coords, rgba):
        cs = self.cell_size
        for (col, row) in coords:
            s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(rgba)
            self.screen.blit(s, self._cell_rect(col, row).topleft)

    def _draw_grid(self):
        for cell in self.board.cells():
            rect = self._cell_rect(cell.column, cell.row)
            color = WALL_DARK if cell.kind is CellKind.WALL else FLOOR_GRAY
            pygame.draw.rect(self.screen, color, rect)
            pygame.draw.rect(self.screen, BLACK, rect, 1)

        self._overlay(self.pathfinder.searched, SEARCHING_A)
        self._overlay(self.pathfinder.selected, SELECTED_A)

        path = self.pathfinder.selected
        if len(path) >= 2:
            pts = [self._cell_rect(col, row).center for (col, row) in path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, 3)

        goal = self.board.goal()
        self._draw_badge(goal.position, "G", RED)
        self._draw_badge(self.agent.position, "", BLUE)

    def _draw_badge(self, pos: Tuple[float, float], label: str, color: Tuple[int, int, int]):
        col, row = pos
        center = self._cell_rect(col, row).center
        pygame.draw.circle(self.screen, color, center, max(6, self.cell_size//2 - 4))
        if label:
            txt = self.font_small.render(label, True, WHITE)
            self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 30
        gap = 6

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Restart", self._reset); y += h + gap
        add("Manual control", self._toggle_manual, togglable=True, store_as="btn_manual"); y += h + gap

        self._algo_buttons: Dict[Algorithm, UIButton] = {}
        for algo in Algorithm:
            add(f"Algo: {algo.label}", lambda a=algo: self._switch_algo(a), togglable=True)
            self._algo_buttons[algo] = self._buttons[-1]
            y += h + gap

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.running)
        if hasattr(self, "btn_manual") and hasattr(self, "agent"):
            self.btn_manual.set_active(self.agent.keyboard_control)
        for algo, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(algo is self.selected_algo)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
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
        line(f"{self.pathfinder.name} — {self.state}", big=True, color=ACCENT_GOLD)
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Open: {m.get('open_size', 0)}")
        line(f"Closed: {m.get('closed_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        if m.get("elapsed_ms"):
            line(f"Solve time: {m['elapsed_ms']:.1f} ms")
        line(f"Heuristic: {self.heuristic.value}")
        line(f"Seed: {self.seed}   Speed: {round(1.0 / max(self.agent.delay, 1e-6))} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font_small)


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    try:
        settings = resolve_settings(argv)
        viewer = Viewer(settings)
    except GridPathError as ex:
        print(f"Failed to start: {ex}")
        sys.exit(1)
    viewer.run()


if __name__ == "__main__":
    main()
