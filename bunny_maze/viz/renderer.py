import logging
import time
import pygame
from bunny_maze.core.moves import Direction
from bunny_maze.game import GameSession

logger = logging.getLogger("bunny_maze.renderer")


class Theme:
    def __init__(self, bg, cell, cell_border, text, hud):
        self.bg = bg
        self.cell = cell
        self.cell_border = cell_border
        self.text = text
        self.hud = hud


DARK = Theme(bg=(18, 18, 22), cell=(48, 62, 48), cell_border=(0, 0, 0), text=(235, 235, 235), hud=(30, 30, 36))
LIGHT = Theme(bg=(238, 238, 232), cell=(170, 205, 160), cell_border=(40, 40, 40), text=(20, 20, 20), hud=(215, 215, 210))


class Renderer:
    COLOR_ROCK = (120, 115, 110)
    COLOR_GOAL = (70, 110, 200)
    COLOR_NEXT = (230, 210, 60)
    COLOR_TRAIL = (200, 180, 90)
    COLOR_BUNNY = (250, 250, 250)
    COLOR_CARROT = (245, 140, 30)
    COLOR_LEAF = (60, 170, 60)
    COLOR_STAR = (255, 215, 0)

    HUD_HEIGHT = 150

    KEY_MOVES = {
        pygame.K_UP: Direction.UP,
        pygame.K_w: Direction.UP,
        pygame.K_DOWN: Direction.DOWN,
        pygame.K_s: Direction.DOWN,
        pygame.K_LEFT: Direction.LEFT,
        pygame.K_a: Direction.LEFT,
        pygame.K_RIGHT: Direction.RIGHT,
        pygame.K_d: Direction.RIGHT,
    }

    def __init__(self, session: GameSession, width=720, height=880, recorder=None):
        self.session = session
        self.screen_width = width
        self.screen_height = height
        self.recorder = recorder

        self.font = None
        self.big_font = None
        self.running = True
        self.clock = None
        self.surface = None

    @property
    def theme(self) -> Theme:
        return DARK if self.session.dark_mode else LIGHT

    def init_window(self):
        pygame.init()
        pygame.display.set_caption("Bunny Maze")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 18)
        self.big_font = pygame.font.SysFont("Consolas", 36, bold=True)

    def board_geometry(self):
        """Returns (cell_size, offset_x, offset_y) that fit the board above the HUD."""
        padding = 20
        size = self.session.maze_size
        available_w = self.screen_width - padding * 2
        available_h = self.screen_height - self.HUD_HEIGHT - padding * 2
        cell_size = max(4, min(available_w, available_h) // size)
        offset_x = (self.screen_width - cell_size * size) // 2
        offset_y = padding + (available_h - cell_size * size) // 2
        return cell_size, offset_x, offset_y

    def handle_input(self):
        now = time.monotonic()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEBUTTONDOWN and self.session.show_victory:
                self.session.dismiss_victory()

            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key, now)

    def handle_key(self, key, now: float):
        session = self.session

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.running = False
            return

        if session.show_victory:
            session.dismiss_victory()
            return

        if key in self.KEY_MOVES:
            session.push(self.KEY_MOVES[key])
        elif key in (pygame.K_RETURN, pygame.K_SPACE):
            session.run(now)
        elif key in (pygame.K_BACKSPACE, pygame.K_c):
            session.clear()
        elif key == pygame.K_g:
            session.generate()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            session.set_size(session.maze_size + 1)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            session.set_size(session.maze_size - 1)
        elif key == pygame.K_t:
            session.toggle_dark_mode()

    def draw_board(self, now: float):
        session = self.session
        theme = self.theme
        maze = session.maze
        cell_size, ox, oy = self.board_geometry()
        trail = set(session.trail(now))

        for y in range(maze.size):
            for x in range(maze.size):
                rect = pygame.Rect(ox + x * cell_size + 1, oy + y * cell_size + 1, cell_size - 2, cell_size - 2)

                color = theme.cell
                if session.next_cell == (x, y):
                    color = self.COLOR_NEXT
                elif (x, y) == maze.goal:
                    color = self.COLOR_GOAL
                elif (x, y) in trail:
                    color = self.COLOR_TRAIL
                pygame.draw.rect(self.surface, color, rect, border_radius=5)
                pygame.draw.rect(self.surface, theme.cell_border, rect, 1, border_radius=5)

                if session.bunny == (x, y):
                    self.draw_bunny(rect)
                elif maze.is_obstacle(x, y):
                    pygame.draw.ellipse(self.surface, self.COLOR_ROCK, rect.inflate(-cell_size // 4, -cell_size // 3))
                elif (x, y) == maze.goal:
                    self.draw_carrot(rect)

    def draw_bunny(self, rect: pygame.Rect):
        r = rect.width // 4
        cx, cy = rect.centerx, rect.centery + r // 2
        ear_w, ear_h = max(2, r // 2), r * 2
        pygame.draw.ellipse(self.surface, self.COLOR_BUNNY, (cx - r + 1, cy - r - ear_h + 2, ear_w, ear_h))
        pygame.draw.ellipse(self.surface, self.COLOR_BUNNY, (cx + r - ear_w - 1, cy - r - ear_h + 2, ear_w, ear_h))
        pygame.draw.circle(self.surface, self.COLOR_BUNNY, (cx, cy), r)

    def draw_carrot(self, rect: pygame.Rect):
        cx, top, bottom = rect.centerx, rect.top + rect.height // 3, rect.bottom - rect.height // 6
        half = rect.width // 8
        pygame.draw.polygon(self.surface, self.COLOR_CARROT, [(cx - half, top), (cx + half, top), (cx, bottom)])
        pygame.draw.line(self.surface, self.COLOR_LEAF, (cx, top), (cx, rect.top + rect.height // 6), 3)

    def draw_hud(self):
        session = self.session
        theme = self.theme
        top = self.screen_height - self.HUD_HEIGHT
        pygame.draw.rect(self.surface, theme.hud, (0, top, self.screen_width, self.HUD_HEIGHT))

        queued = " ".join(m.arrow for m in session.queue) or "-"
        info = [
            f"Moves: {queued}",
            session.message,
            f"Size: {session.maze_size}x{session.maze_size}   Wins: {session.wins}"
            + ("   REC" if self.recorder and self.recorder.active else ""),
            "Arrows/WASD queue  Enter run  C clear  G new  +/- size  T theme",
        ]
        for i, text in enumerate(info):
            if not text:
                continue
            lbl = self.font.render(text, True, theme.text)
            self.surface.blit(lbl, (16, top + 14 + i * 30))

    def draw_victory(self):
        overlay = pygame.Surface((self.screen_width, self.screen_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 205))
        self.surface.blit(overlay, (0, 0))

        cx, cy = self.screen_width // 2, self.screen_height // 2
        pygame.draw.circle(self.surface, self.COLOR_STAR, (cx, cy - 120), 50)

        title = self.big_font.render("Victory!", True, (255, 255, 255))
        self.surface.blit(title, title.get_rect(center=(cx, cy - 20)))
        wins = self.font.render(f"Total Wins: {self.session.wins}", True, (255, 255, 255))
        self.surface.blit(wins, wins.get_rect(center=(cx, cy + 30)))
        hint = self.font.render("Press any key for a new maze", True, (200, 200, 200))
        self.surface.blit(hint, hint.get_rect(center=(cx, cy + 70)))

    def run_loop(self):
        while self.running:
            self.handle_input()

            now = time.monotonic()
            self.session.tick(now)

            self.surface.fill(self.theme.bg)
            self.draw_board(now)
            self.draw_hud()
            if self.session.show_victory:
                self.draw_victory()
            pygame.display.flip()

            if self.recorder:
                self.recorder.capture_frame(self.surface)

            self.clock.tick(60)

        if self.recorder:
            self.recorder.stop()
        pygame.quit()
