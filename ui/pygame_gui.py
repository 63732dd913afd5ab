from __future__ import annotations

import pygame
from pygame import gfxdraw

from core.game import TurnEngine
from core.pieces import Color, PieceView

from .controller import BoardController, board_coords_from_pos


class CheckersGUI:
    def __init__(self, engine: TurnEngine, square_size: int = 80, info_height: int = 190) -> None:
        self.engine = engine
        self.controller = BoardController(engine)
        self.square_size = square_size
        self.board_size = self.engine.board.boardSize
        self.board_pixels = self.square_size * self.board_size
        self.info_height = info_height

        self.margin = 40
        self.window_width = self.board_pixels + self.margin * 2
        self.window_height = self.board_pixels + self.info_height + self.margin * 2

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Checkers")

        self.font = pygame.font.SysFont("arial", 24)
        self.small_font = pygame.font.SysFont("arial", 16)
        self.title_font = pygame.font.SysFont("arial", 28, bold=True)
        self.king_font = pygame.font.SysFont("arial", 22, bold=True)
        self.clock = pygame.time.Clock()

        self.hover_cell: tuple[int, int] | None = None
        self.piece_surfaces: dict[tuple[Color, bool], pygame.Surface] = {}

        self.colors = {
            "light": (233, 210, 173),
            "dark": (145, 104, 66),
            "selected": (252, 142, 80),
            "light_piece": (245, 245, 245),
            "dark_piece": (35, 35, 35),
            "outline": (25, 25, 25),
            "background": (30, 34, 45),
            "background_accent": (50, 58, 74),
            "info_bg": (40, 46, 60),
            "panel_border": (86, 94, 110),
            "text": (230, 230, 230),
            "error": (255, 120, 110),
            "board_frame": (82, 54, 29),
            "king": (255, 215, 0),
        }

        self.board_surface = pygame.Surface((self.board_pixels, self.board_pixels))
        self.background_surface = self._build_background_surface(self.window_width, self.window_height)

    def run(self) -> None:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_r:
                        self.controller.reset()
                    elif event.key == pygame.K_e:
                        self.controller.end_turn()
                elif event.type == pygame.MOUSEMOTION:
                    self.hover_cell = self._board_coords_from_pos(event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self._handle_click(event.pos)

            self._draw()
            pygame.display.flip()
            self.clock.tick(60)
        self.controller.close()

    def _handle_click(self, pos: tuple[int, int]) -> None:
        cell = self._board_coords_from_pos(pos)
        if cell is None:
            return
        self.controller.click(cell)

    def _board_coords_from_pos(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        return board_coords_from_pos(
            pos,
            margin=self.margin,
            square_size=self.square_size,
            board_size=self.board_size,
        )

    def _draw(self) -> None:
        self.screen.blit(self.background_surface, (0, 0))
        board_rect = pygame.Rect(self.margin, self.margin, self.board_pixels, self.board_pixels)
        pygame.draw.rect(self.screen, self.colors["board_frame"], board_rect.inflate(20, 20), border_radius=20)

        for row, col in self.controller.take_dirty():
            self._draw_square(row, col)
        self.screen.blit(self.board_surface, board_rect.topleft)

        self._draw_hover()
        self._draw_info_panel()

    def _draw_square(self, row: int, col: int) -> None:
        color = self.colors["light"] if (row + col) % 2 == 0 else self.colors["dark"]
        rect = pygame.Rect(col * self.square_size, row * self.square_size, self.square_size, self.square_size)
        pygame.draw.rect(self.board_surface, color, rect)

        if self.controller.selected == (row, col):
            pygame.draw.rect(self.board_surface, self.colors["selected"], rect, 4, border_radius=8)

        view = self.engine.piece_at((row, col))
        if view is not None:
            surface = self._get_piece_surface(view)
            self.board_surface.blit(surface, surface.get_rect(center=rect.center))

    def _draw_hover(self) -> None:
        if self.controller.selected is None or self.hover_cell is None:
            return
        if self.engine.piece_at(self.hover_cell) is not None:
            return
        cx, cy = self._center_for_cell(*self.hover_cell)
        gfxdraw.filled_circle(self.screen, cx, cy, 12, (*self.colors["selected"], 110))
        gfxdraw.aacircle(self.screen, cx, cy, 12, self.colors["outline"])

    def _draw_info_panel(self) -> None:
        panel_top = self.margin + self.board_pixels + 30
        info_rect = pygame.Rect(self.margin, panel_top, self.board_pixels, self.info_height - 20)

        pygame.draw.rect(self.screen, self.colors["info_bg"], info_rect, border_radius=16)
        pygame.draw.rect(self.screen, self.colors["panel_border"], info_rect, 2, border_radius=16)

        title = self.title_font.render("Match Overview", True, self.colors["text"])
        self.screen.blit(title, (info_rect.left + 20, info_rect.top + 16))

        state = self.engine.state
        board = self.engine.board
        status = "Game over" if state.is_game_over else f"{state.current_player.value.capitalize()} to move"
        if state.winner is not None:
            status += f", {state.winner.value} wins"

        meta_lines = [
            status,
            f"Light: {board.count(Color.LIGHT)}   Dark: {board.count(Color.DARK)}",
            "R: Reset  |  E: End turn  |  Esc/Q: Quit",
        ]
        y_offset = info_rect.top + 60
        for line in meta_lines:
            text_surface = self.small_font.render(line, True, self.colors["text"])
            self.screen.blit(text_surface, (info_rect.left + 24, y_offset))
            y_offset += 22

        if self.controller.message:
            error = self.small_font.render(self.controller.message, True, self.colors["error"])
            self.screen.blit(error, (info_rect.left + 24, y_offset + 6))

    def _build_background_surface(self, width: int, height: int) -> pygame.Surface:
        surface = pygame.Surface((width, height))
        top_color = self.colors["background_accent"]
        bottom_color = self.colors["background"]
        for y in range(height):
            t = y / max(height - 1, 1)
            blended = self._mix_color(top_color, bottom_color, t)
            pygame.draw.line(surface, blended, (0, y), (width, y))
        return surface

    def _center_for_cell(self, row: int, col: int) -> tuple[int, int]:
        return (
            self.margin + col * self.square_size + self.square_size // 2,
            self.margin + row * self.square_size + self.square_size // 2,
        )

    def _get_piece_surface(self, view: PieceView) -> pygame.Surface:
        key = (view.color, view.is_king)
        if key in self.piece_surfaces:
            return self.piece_surfaces[key]

        diameter = self.square_size - 14
        radius = diameter // 2
        surface = pygame.Surface((diameter, diameter), pygame.SRCALPHA)
        cx, cy = surface.get_width() // 2, surface.get_height() // 2

        base = self.colors["light_piece"] if view.color == Color.LIGHT else self.colors["dark_piece"]
        pygame.draw.circle(surface, base, (cx, cy), radius)
        pygame.draw.circle(surface, self.colors["outline"], (cx, cy), radius, 2)

        if view.is_king:
            king_color = self.colors["outline"] if view.color == Color.LIGHT else self.colors["king"]
            crown = self.king_font.render("K", True, king_color)
            surface.blit(crown, crown.get_rect(center=(cx, cy)))

        self.piece_surfaces[key] = surface
        return surface

    @staticmethod
    def _mix_color(a: tuple[int, int, int], b: tuple[int, int, int], t: float) -> tuple[int, int, int]:
        clamped = max(0.0, min(1.0, t))
        return tuple(int(a[i] * (1.0 - clamped) + b[i] * clamped) for i in range(3))
