import logging
import pygame
from love_maze.core.maze import Maze
from love_maze.core.navigator import Direction
from love_maze.io.card import CardState
from love_maze.viz.colors import ColorScheme, translucent

logger = logging.getLogger(__name__)

class Renderer:
    FPS = 60
    BLOCKED_FLASH_FRAMES = 8

    KEYMAP = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
    }

    def __init__(self, maze: Maze, colors: ColorScheme, card: CardState, recorder=None):
        self.maze = maze
        self.colors = colors
        self.card = card
        self.screen_width = int(maze.width)
        self.screen_height = int(maze.height)

        self.recorder = recorder

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.blocked_frames = 0

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(self.card.share_title())
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Georgia", 18)

    def to_screen(self, x: float, y: float):
        mx, my = self.maze.margin
        return x + mx, y + my

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key in self.KEYMAP:
                    if not self.maze.try_move(self.KEYMAP[event.key]):
                        self.blocked_frames = self.BLOCKED_FLASH_FRAMES

    def draw_wall(self, x1: float, y1: float, x2: float, y2: float):
        # Thick wall with square caps that reach half a stroke past each end
        t = self.maze.cell_width / 2
        left, right = min(x1, x2) - t / 2, max(x1, x2) + t / 2
        top, bottom = min(y1, y2) - t / 2, max(y1, y2) + t / 2
        sx, sy = self.to_screen(left, top)
        pygame.draw.rect(self.surface, self.colors.foreground,
                         (round(sx), round(sy), round(right - left), round(bottom - top)))

    def draw_cells(self):
        grid = self.maze.grid
        cw, ch = self.maze.cell_width, self.maze.cell_height
        for row in range(grid.rows):
            for col in range(grid.cols):
                cell = grid.cell_at(col, row)
                x, y = col * cw, row * ch
                if not cell.visited:
                    # Unvisited cells render as solid blocks, bleeding over like a thick stroke
                    sx, sy = self.to_screen(x - cw / 4, y - ch / 4)
                    pygame.draw.rect(self.surface, self.colors.foreground,
                                     (round(sx), round(sy), round(cw * 1.5), round(ch * 1.5)))
                    continue
                if cell.top:
                    self.draw_wall(x, y, x + cw, y)
                if cell.right:
                    self.draw_wall(x + cw, y, x + cw, y + ch)
                if cell.bottom:
                    self.draw_wall(x, y + ch, x + cw, y + ch)
                if cell.left:
                    self.draw_wall(x, y, x, y + ch)

    def draw_heart(self, col: float, row: float, color: pygame.Color):
        size = self.maze.cell_height
        cx, cy = self.to_screen((col + 0.5) * self.maze.cell_width, (row + 0.5) * size)
        r = size / 4
        pygame.draw.circle(self.surface, color, (round(cx - r), round(cy - r / 2)), round(r))
        pygame.draw.circle(self.surface, color, (round(cx + r), round(cy - r / 2)), round(r))
        pygame.draw.polygon(self.surface, color, [
            (cx - 2 * r, cy - r / 3),
            (cx + 2 * r, cy - r / 3),
            (cx, cy + 1.6 * r),
        ])

    def draw_icons(self):
        start = self.maze.start_cell
        if start is not None:
            self.draw_heart(start[0], start[1], self.colors.highlight)

        exit_record = self.maze.exit()
        if exit_record is not None:
            # Pulled half a cell back toward the grid so it sits in the opening
            dcol = (exit_record.col - exit_record.anchor_col) / 2
            drow = (exit_record.row - exit_record.anchor_row) / 2
            self.draw_heart(exit_record.anchor_col + dcol, exit_record.anchor_row + drow,
                            self.colors.highlight)

    def draw_marker(self):
        navigator = self.maze.navigator
        if navigator is None or not self.maze.is_done():
            return
        m = navigator.marker
        sx, sy = self.to_screen(m.left, m.top)
        color = self.colors.foreground if self.blocked_frames else translucent(self.colors.highlight)
        overlay = pygame.Surface((round(m.width), round(m.height)), pygame.SRCALPHA)
        overlay.fill(color)
        self.surface.blit(overlay, (round(sx), round(sy)))

    def draw_text(self):
        mx, my = self.maze.margin
        seed = self.font.render(self.maze.seed, True, self.colors.foreground)
        self.surface.blit(seed, (self.screen_width - mx - 100, self.screen_height - my / 2))

        if self.maze.reached_exit():
            text = self.card.message or self.card.share_text()
            lbl = self.font.render(text, True, self.colors.highlight)
            self.surface.blit(lbl, (mx, my / 2 - lbl.get_height() / 2))

    def run_loop(self):
        while self.running:
            self.handle_input()

            # One generation step per frame
            if not self.maze.is_done():
                self.maze.step()
                exit_record = self.maze.exit()
                if exit_record is not None:
                    logger.info(f"Maze complete, exit on the {exit_record.side_name} side")

            self.surface.fill(self.colors.background)
            self.draw_cells()
            self.draw_icons()
            self.draw_marker()
            self.draw_text()
            pygame.display.flip()

            if self.blocked_frames:
                self.blocked_frames -= 1

            if self.recorder is not None:
                self.recorder.capture_frame(self.surface, self.maze.is_done())

            self.clock.tick(self.FPS)

        if self.recorder is not None:
            self.recorder.stop()
        pygame.quit()
