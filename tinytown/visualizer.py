"""
pygame front end for tinytown.

Draws the canvas, forwards mouse clicks to the selection system and runs
the frame loop:
- Left click a person to select them, left click elsewhere to send them
- Right click or ESC to drop the selection
- G toggles the reference grid, R rebuilds the scenario, Q quits
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import pygame

from tinytown.config import SimConfig
from tinytown.core.clock import FrameClock
from tinytown.core.entities import Building, Person, PersonState, Road
from tinytown.core.events import log_event
from tinytown.core.vec2 import Vec2
from tinytown.game_state import GameState
from tinytown.systems import deselect, handle_click, steering, window_to_canvas

logger = logging.getLogger(__name__)


# =============================================================================
# Colors
# =============================================================================

class Colors:
    BACKGROUND = (20, 20, 30)
    GRID = (255, 255, 255)
    TEXT = (200, 200, 200)

    # People, by state tag
    DEFAULT = (255, 255, 255)
    SELECTED = (255, 0, 0)
    MOVING = (0, 255, 0)
    SHADOW = (0, 0, 0, 77)

    ROAD = (128, 0, 128)


PERSON_COLORS = {
    PersonState.DEFAULT: Colors.DEFAULT,
    PersonState.SELECTED: Colors.SELECTED,
    PersonState.MOVING: Colors.MOVING,
}

SHADOW_OFFSET = 3
ROAD_WIDTH = 20


# =============================================================================
# Coordinate conversion
# =============================================================================

@dataclass
class Camera:
    """Handles canvas-to-window scaling."""
    canvas_width: int
    canvas_height: int
    window_width: int
    window_height: int

    @property
    def canvas_size(self) -> tuple[int, int]:
        return self.canvas_width, self.canvas_height

    @property
    def window_size(self) -> tuple[int, int]:
        return self.window_width, self.window_height

    @property
    def is_scaled(self) -> bool:
        return self.canvas_size != self.window_size

    def window_to_canvas(self, pos: tuple[int, int]) -> Vec2:
        """Convert a window pixel position to canvas units."""
        return window_to_canvas(pos, self.window_size, self.canvas_size)


# =============================================================================
# Renderers
# =============================================================================

class GridRenderer:
    """Draws the fixed reference grid."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def render(self, state: GameState):
        w, h = self.surface.get_size()
        for x in state.grid.vertical_lines():
            pygame.draw.line(self.surface, Colors.GRID, (round(x), 0), (round(x), h), 1)
        for y in state.grid.horizontal_lines():
            pygame.draw.line(self.surface, Colors.GRID, (0, round(y)), (w, round(y)), 1)


class PersonRenderer:
    """Draws people as filled circles with a drop shadow."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def render(self, person: Person):
        center = person.pos.as_int_tuple()
        radius = max(1, round(person.size))

        # Shadow
        shadow = pygame.Surface((radius * 2 + 2, radius * 2 + 2), pygame.SRCALPHA)
        pygame.draw.circle(shadow, Colors.SHADOW, (radius + 1, radius + 1), radius + 1)
        self.surface.blit(
            shadow,
            (center[0] - radius - 1 + SHADOW_OFFSET, center[1] - radius - 1 + SHADOW_OFFSET),
        )

        pygame.draw.circle(self.surface, PERSON_COLORS[person.state], center, radius)


class TownRenderer:
    """Draws buildings and roads."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def render_building(self, building: Building, state: GameState):
        # A 1x1 building is half a grid cell across, centered on its grid point
        center = state.grid.to_canvas(building.corner)
        w = state.grid.cell_width / 2 * building.width
        h = state.grid.cell_height / 2 * building.height
        rect = pygame.Rect(round(center.x - w / 2), round(center.y - h / 2), round(w), round(h))
        pygame.draw.rect(self.surface, building.color, rect)

    def render_road(self, road: Road, state: GameState):
        start = state.grid.to_canvas(road.start).as_int_tuple()
        end = state.grid.to_canvas(road.end).as_int_tuple()
        pygame.draw.line(self.surface, Colors.ROAD, start, end, ROAD_WIDTH)


class SceneRenderer:
    """Clears the canvas and draws every entity in list order."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.grid_renderer = GridRenderer(surface)
        self.person_renderer = PersonRenderer(surface)
        self.town_renderer = TownRenderer(surface)

    def render(self, state: GameState, show_grid: bool = True):
        self.surface.fill(Colors.BACKGROUND)

        if show_grid:
            self.grid_renderer.render(state)

        for obj in state.objects:
            if isinstance(obj, Person):
                self.person_renderer.render(obj)
            elif isinstance(obj, Building):
                self.town_renderer.render_building(obj, state)
            elif isinstance(obj, Road):
                self.town_renderer.render_road(obj, state)


# =============================================================================
# Main Visualizer
# =============================================================================

class Visualizer:
    """Main visualizer class that runs the pygame loop."""

    def __init__(self, config: SimConfig, state_factory: Callable[[SimConfig], GameState]):
        pygame.init()
        pygame.display.set_caption("tinytown")

        self.config = config
        self.state_factory = state_factory

        window_w, window_h = config.window_size
        self.camera = Camera(config.canvas_width, config.canvas_height, window_w, window_h)
        self.screen = pygame.display.set_mode(self.camera.window_size)
        self.canvas = pygame.Surface(self.camera.canvas_size)
        self.scene = SceneRenderer(self.canvas)
        self.font = pygame.font.SysFont("Monaco", 12)

        self.fps_clock = pygame.time.Clock()
        self.frame_clock = FrameClock(time_unit_ms=config.time_unit_ms)

        self.running = True
        self.show_grid = config.show_grid
        self.state = self._new_state()

    def _new_state(self) -> GameState:
        state = self.state_factory(self.config)
        state.event_bus.subscribe_all(log_event)
        return state

    def reset(self):
        """Rebuild the scenario from scratch."""
        logger.info("Resetting scenario")
        self.state = self._new_state()
        self.frame_clock.reset()
        self.frame_clock.start()

    def handle_events(self):
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:
                    handle_click(self.state, self.camera.window_to_canvas(event.pos))
                elif event.button == 3:
                    deselect(self.state)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    self.running = False
                elif event.key == pygame.K_ESCAPE:
                    deselect(self.state)
                elif event.key == pygame.K_g:
                    self.show_grid = not self.show_grid
                elif event.key == pygame.K_r:
                    self.reset()

    def update(self):
        steering.update(self.state, self.frame_clock.tick())

    def render(self):
        self.scene.render(self.state, self.show_grid)

        if self.camera.is_scaled:
            scaled = pygame.transform.smoothscale(self.canvas, self.camera.window_size)
            self.screen.blit(scaled, (0, 0))
        else:
            self.screen.blit(self.canvas, (0, 0))

        self._render_status()
        pygame.display.flip()

    def _render_status(self):
        selected = self.state.selected.id if self.state.selected else "-"
        line = (
            f"selected: {selected}   t: {self.frame_clock.format_time()}   "
            f"fps: {self.fps_clock.get_fps():.0f}   [G] grid  [R] reset  [Q] quit"
        )
        surf = self.font.render(line, True, Colors.TEXT)
        self.screen.blit(surf, (8, self.camera.window_height - 20))

    def run(self, max_frames: Optional[int] = None):
        """Run the visualization loop until the window closes."""
        logger.info(f"Opening {self.camera.window_width}x{self.camera.window_height} window")
        self.frame_clock.start()
        frames = 0

        while self.running:
            self.handle_events()
            self.update()
            self.render()
            self.fps_clock.tick(self.config.fps)

            frames += 1
            if max_frames is not None and frames >= max_frames:
                break

        pygame.quit()
