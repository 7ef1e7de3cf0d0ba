"""Tests for the pygame renderers and visualizer (dummy video driver)."""

import pygame
import pytest

from tinytown.core.entities import Building, PersonState, Road
from tinytown.core.grid import GridPoint
from tinytown.core.vec2 import Vec2
from tinytown.scenarios import build_scenario
from tinytown.visualizer import Camera, Colors, SceneRenderer, Visualizer


def rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


@pytest.fixture
def canvas():
    return pygame.Surface((600, 600))


class TestCamera:
    """Tests for window/canvas conversion."""

    def test_unscaled(self):
        camera = Camera(600, 600, 600, 600)
        assert not camera.is_scaled
        assert camera.window_to_canvas((10, 20)) == Vec2(10, 20)

    def test_scaled_window(self):
        camera = Camera(600, 600, 900, 900)
        assert camera.is_scaled
        assert camera.window_to_canvas((450, 90)) == Vec2(300, 60)


class TestSceneRenderer:
    """Tests for drawing entities onto the canvas."""

    def test_clears_to_background(self, canvas, state):
        SceneRenderer(canvas).render(state, show_grid=False)
        assert rgb(canvas, 10, 10) == Colors.BACKGROUND

    def test_grid_lines(self, canvas, state):
        renderer = SceneRenderer(canvas)
        renderer.render(state, show_grid=True)
        assert rgb(canvas, 300, 10) == Colors.GRID
        assert rgb(canvas, 10, 500) == Colors.GRID

        renderer.render(state, show_grid=False)
        assert rgb(canvas, 300, 10) == Colors.BACKGROUND

    @pytest.mark.parametrize("person_state,color", [
        (PersonState.DEFAULT, Colors.DEFAULT),
        (PersonState.SELECTED, Colors.SELECTED),
        (PersonState.MOVING, Colors.MOVING),
    ])
    def test_person_color_follows_state(self, canvas, state, make_person, person_state, color):
        person = make_person(250, 250)
        person.state = person_state
        SceneRenderer(canvas).render(state, show_grid=False)
        assert rgb(canvas, 250, 250) == color

    def test_person_has_drop_shadow(self, canvas, state, make_person):
        make_person(250, 250)
        SceneRenderer(canvas).render(state, show_grid=False)
        r, g, b = rgb(canvas, 263, 253)
        assert r < Colors.BACKGROUND[0]
        assert b < Colors.BACKGROUND[2]

    def test_building_and_road(self, canvas, state):
        a = Building("a", GridPoint(0, 0))
        b = Building("b", GridPoint(0, 1))
        state.add(Road.connect(a, b), a, b)

        SceneRenderer(canvas).render(state, show_grid=True)

        assert rgb(canvas, 110, 110) == a.color
        assert rgb(canvas, 105, 150) == Colors.ROAD
        assert rgb(canvas, 130, 150) == Colors.BACKGROUND


class TestVisualizer:
    """Tests for the event loop plumbing."""

    @pytest.fixture
    def vis(self, config, state, make_person):
        make_person(250, 250)
        visualizer = Visualizer(config.with_overrides(window_scale=2.0), lambda _: state)
        yield visualizer
        pygame.quit()

    def test_click_selects_with_scaling(self, vis, state):
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(500, 500), button=1))
        vis.handle_events()
        assert state.selected is state.people[0]

    def test_right_click_deselects(self, vis, state):
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(500, 500), button=1))
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(10, 10), button=3))
        vis.handle_events()
        assert state.selected is None

    def test_quit_key_stops_loop(self, vis):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
        vis.handle_events()
        assert not vis.running

    def test_grid_toggle(self, vis):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_g))
        vis.handle_events()
        assert vis.show_grid is False

    def test_run_renders_frames(self, vis, state):
        vis.run(max_frames=3)
        assert state.frame == 3

    def test_escape_deselects(self, vis, state):
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(500, 500), button=1))
        vis.handle_events()
        assert state.selected is not None

        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        vis.handle_events()
        assert state.selected is None
        assert vis.running


class TestVisualizerReset:
    """Tests for rebuilding the scenario with the R key."""

    def test_r_key_rebuilds_state(self, config):
        built = []

        def factory(cfg):
            state = build_scenario(cfg)
            built.append(state)
            return state

        vis = Visualizer(config, factory)
        try:
            vis.frame_clock.start()
            vis.update()
            vis.update()
            first = vis.state
            assert first.frame == 2

            pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r))
            vis.handle_events()

            assert len(built) == 2
            assert vis.state is built[1]
            assert vis.state is not first
            assert vis.state.frame == 0
            assert vis.frame_clock.frame_count == 0
        finally:
            pygame.quit()
