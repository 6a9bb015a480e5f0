"""
test_simulation.py
------------------
Regression tests for the per-frame simulation step.

Covers:
- Steering precedence and sprite selection
- Jump start, immunity and timeout
- Crash, frozen wipeout and respawn
- Recycling, spawning and determinism over long runs
"""

import random

import pygame
import pytest

from snoboard.core.runtime import simulation
from snoboard.core.runtime.simulation_config import SimulationConfig
from snoboard.core.runtime.simulation_state import SimulationState
from snoboard.core.services.event_manager import (
    EventManager, ObstacleSpawnedEvent, PlayerCrashedEvent, PlayerRespawnedEvent,
)
from snoboard.entities.entity_types import ObstacleKind, VisualState

FRAME = 1 / 60


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def recorded_events():
    """EventManager plus the list every gameplay event is appended to."""
    events = EventManager()
    received = []
    for event_type in (PlayerCrashedEvent, PlayerRespawnedEvent, ObstacleSpawnedEvent):
        events.subscribe(event_type, received.append)
    return events, received


@pytest.fixture
def crashed_state(quiet_state, make_obstacle, no_input):
    """A state whose player has just hit a server rack."""
    quiet_state.obstacles.append(make_obstacle(512, 400))
    simulation.step(quiet_state, FRAME, no_input)
    assert quiet_state.dead
    return quiet_state


# ===========================================================
# Movement & Control
# ===========================================================

class TestMovement:

    def test_descends_at_base_speed(self, quiet_state, no_input):
        simulation.step(quiet_state, 0.1, no_input)

        assert quiet_state.player.position.x == pytest.approx(512)
        assert quiet_state.player.position.y == pytest.approx(414)

    @pytest.mark.parametrize("left, right, velocity_x, visual", [
        (False, False, 0, VisualState.FORWARD),
        (True, False, -300, VisualState.LEFT),
        (False, True, 300, VisualState.RIGHT),
        (True, True, 300, VisualState.RIGHT),  # right is checked last
    ])
    def test_horizontal_control(self, quiet_state, make_inputs, left, right, velocity_x, visual):
        simulation.step(quiet_state, FRAME, make_inputs(left=left, right=right))

        assert quiet_state.player.velocity.x == velocity_x
        assert quiet_state.player.visual_state is visual

    def test_steering_moves_player_sideways(self, quiet_state, make_inputs):
        simulation.step(quiet_state, 0.5, make_inputs(left=True))

        assert quiet_state.player.position.x == pytest.approx(512 - 150)

    def test_camera_leads_player(self, quiet_state, no_input):
        simulation.step(quiet_state, 0.5, no_input)

        player = quiet_state.player.position
        assert quiet_state.camera_position.x == pytest.approx(player.x - 512)
        assert quiet_state.camera_position.y == pytest.approx(player.y - 384 + 200)

    def test_camera_without_lead(self, no_input):
        state = SimulationState(SimulationConfig(camera_lead=0, initial_difficulty=1000.0))
        simulation.step(state, 0.5, no_input)

        assert state.camera_position == state.player.position - pygame.Vector2(512, 384)


@pytest.mark.parametrize("left, right, jumping, alive, expected", [
    (False, False, False, True, VisualState.FORWARD),
    (True, False, False, True, VisualState.LEFT),
    (False, True, False, True, VisualState.RIGHT),
    (False, False, True, True, VisualState.JUMP),
    (True, False, True, True, VisualState.JUMP_LEFT),
    (True, True, True, True, VisualState.JUMP_RIGHT),
    (True, False, True, False, VisualState.WIPEOUT),
])
def test_visual_state_selection(make_inputs, left, right, jumping, alive, expected):
    inputs = make_inputs(left=left, right=right)
    assert simulation.visual_state_for(inputs, jumping, alive) is expected


# ===========================================================
# Jumping
# ===========================================================

class TestJump:

    def test_jump_speeds_up_descent(self, quiet_state, make_inputs):
        simulation.step(quiet_state, 0.5, make_inputs(jump=True))

        player = quiet_state.player
        assert player.jumping
        assert player.velocity.y == 500
        assert player.time_since_jump == pytest.approx(0.5)
        assert player.position.y == pytest.approx(384 + 250)
        assert player.visual_state is VisualState.JUMP

    def test_jump_ends_after_duration(self, quiet_state, make_inputs, no_input):
        simulation.step(quiet_state, 0.5, make_inputs(jump=True))
        simulation.step(quiet_state, 0.5, no_input)

        player = quiet_state.player
        assert not player.jumping
        assert player.velocity == pygame.Vector2(0, 300)
        assert player.position.y == pytest.approx(384 + 500)

    def test_holding_jump_does_not_restart_timer(self, quiet_state, make_inputs):
        simulation.step(quiet_state, 0.3, make_inputs(jump=True))
        simulation.step(quiet_state, 0.3, make_inputs(jump=True))

        assert quiet_state.player.time_since_jump == pytest.approx(0.6)

    def test_steering_while_airborne(self, quiet_state, make_inputs):
        simulation.step(quiet_state, FRAME, make_inputs(jump=True, left=True))

        assert quiet_state.player.visual_state is VisualState.JUMP_LEFT
        assert quiet_state.player.velocity == pygame.Vector2(-300, 500)

    def test_jump_clears_ground_obstacles(self, quiet_state, make_inputs, make_obstacle):
        quiet_state.obstacles.append(make_obstacle(512, 390, ObstacleKind.GROUND, (48, 48)))

        simulation.step(quiet_state, 0.01, make_inputs(jump=True))

        assert not quiet_state.dead

    def test_jump_does_not_clear_aerial_obstacles(self, quiet_state, make_inputs, make_obstacle):
        quiet_state.obstacles.append(make_obstacle(512, 390, ObstacleKind.AERIAL))

        simulation.step(quiet_state, 0.01, make_inputs(jump=True))

        assert quiet_state.player.jumping
        assert quiet_state.dead

    def test_ground_obstacle_kills_when_not_jumping(self, quiet_state, no_input, make_obstacle):
        quiet_state.obstacles.append(make_obstacle(512, 390, ObstacleKind.GROUND, (48, 48)))

        simulation.step(quiet_state, 0.01, no_input)

        assert quiet_state.dead


# ===========================================================
# Crash & Respawn
# ===========================================================

class TestCrashAndRespawn:

    def test_crash_sets_wipeout(self, crashed_state):
        player = crashed_state.player
        assert not player.alive
        assert player.visual_state is VisualState.WIPEOUT

    def test_crash_dispatches_event(self, quiet_state, make_obstacle, no_input, recorded_events):
        events, received = recorded_events
        quiet_state.obstacles.append(make_obstacle(512, 400))

        simulation.step(quiet_state, FRAME, no_input, events=events)

        assert len(received) == 1
        assert isinstance(received[0], PlayerCrashedEvent)
        assert received[0].score == quiet_state.score

    def test_dead_state_is_frozen(self, crashed_state, make_inputs):
        position = pygame.Vector2(crashed_state.player.position)
        pool = crashed_state.obstacles.snapshot()
        difficulty = crashed_state.difficulty

        for _ in range(10):
            simulation.step(crashed_state, 0.5, make_inputs(left=True, jump=True))

        player = crashed_state.player
        assert player.position == position
        assert crashed_state.obstacles == pool
        assert crashed_state.difficulty == difficulty
        assert player.velocity.x == 0
        assert not player.jumping
        assert player.visual_state is VisualState.WIPEOUT
        assert crashed_state.dead

    def test_confirm_respawns(self, crashed_state, make_inputs):
        crashed_state.difficulty = 0.4

        simulation.step(crashed_state, 0.5, make_inputs(confirm=True))

        player = crashed_state.player
        assert not crashed_state.dead
        assert player.alive
        assert crashed_state.difficulty == 1000.0  # quiet config's initial value
        assert crashed_state.obstacles == []
        assert player.position == pygame.Vector2(512, 384)
        assert player.velocity == pygame.Vector2(0, 300)
        assert crashed_state.score == 0

    def test_respawn_restores_default_difficulty(self, state, make_obstacle, no_input, make_inputs):
        state.obstacles.append(make_obstacle(512, 400))
        simulation.step(state, FRAME, no_input)
        state.difficulty = 0.3

        simulation.step(state, FRAME, make_inputs(confirm=True))

        assert state.difficulty == 1.0
        assert state.time_since_last_obstacle == 0.0

    def test_confirm_while_alive_does_nothing(self, quiet_state, make_inputs):
        simulation.step(quiet_state, 0.1, make_inputs(confirm=True))

        assert quiet_state.player.position.y == pytest.approx(414)

    def test_respawn_dispatches_event(self, crashed_state, make_inputs, recorded_events):
        events, received = recorded_events

        simulation.step(crashed_state, FRAME, make_inputs(confirm=True), events=events)

        assert [type(e) for e in received] == [PlayerRespawnedEvent]

    def test_jump_interrupted_by_crash_does_not_carry_over(self, quiet_state, make_inputs, make_obstacle):
        quiet_state.obstacles.append(make_obstacle(512, 420))
        simulation.step(quiet_state, 0.01, make_inputs(jump=True))
        assert quiet_state.dead

        simulation.step(quiet_state, 0.01, make_inputs(confirm=True))

        assert not quiet_state.player.jumping
        assert quiet_state.player.velocity == pygame.Vector2(0, 300)


# ===========================================================
# Collision Scenario
# ===========================================================

def test_dies_on_first_overlapping_frame(quiet_state, make_obstacle, no_input):
    """Obstacle 700 ahead and 10 to the side: dead exactly when the boxes overlap."""
    quiet_state.obstacles.append(make_obstacle(512 + 10, 384 + 700))
    half_heights = 32 + 64

    frames = 0
    while not quiet_state.dead and frames < 1000:
        next_y = quiet_state.player.position.y + 300 * FRAME
        will_overlap = abs(next_y - 1084) < half_heights

        simulation.step(quiet_state, FRAME, no_input)
        frames += 1

        assert quiet_state.dead == will_overlap

    assert frames == 121
    assert quiet_state.player.position.y == pytest.approx(989)


# ===========================================================
# Recycling & Spawning
# ===========================================================

class TestWorld:

    def test_obstacles_far_behind_are_recycled(self, quiet_state, make_obstacle, no_input):
        behind = make_obstacle(0, 384 - 500, ObstacleKind.GROUND, (48, 48))
        ahead = make_obstacle(-1000, 384 + 300)
        quiet_state.obstacles.append(behind)
        quiet_state.obstacles.append(ahead)

        simulation.step(quiet_state, 0.01, no_input)

        assert quiet_state.obstacles == [ahead]

    def test_spawn_after_interval(self, state, rng, no_input, recorded_events):
        events, received = recorded_events

        simulation.step(state, 1.01, no_input, rng, events)

        assert len(state.obstacles) == 1
        obstacle = state.obstacles[0]
        assert obstacle.position.y == pytest.approx(state.player.position.y + 700)
        assert -1024 <= obstacle.position.x - state.player.position.x < 1024
        assert state.difficulty == pytest.approx(0.99)
        assert state.time_since_last_obstacle == 0.0
        assert isinstance(received[-1], ObstacleSpawnedEvent)
        assert received[-1].kind is obstacle.kind

    def test_no_spawn_before_interval(self, state, rng, no_input):
        simulation.step(state, 0.5, no_input, rng)
        simulation.step(state, 0.5, no_input, rng)

        assert len(state.obstacles) == 0
        assert state.time_since_last_obstacle == pytest.approx(1.0)

    def test_pool_never_holds_stale_obstacles(self, state, make_inputs):
        rng = random.Random(99)
        for frame in range(1800):
            steer = (frame // 45) % 3
            inputs = make_inputs(left=steer == 0, right=steer == 2, jump=frame % 90 == 0)

            simulation.step(state, FRAME, inputs, rng)

            cutoff = state.player.position.y - 400
            assert all(o.position.y >= cutoff for o in state.obstacles)

    def test_same_seed_same_run(self, make_inputs):
        def run(seed):
            state = SimulationState(SimulationConfig())
            rng = random.Random(seed)
            for frame in range(600):
                inputs = make_inputs(left=(frame // 30) % 2 == 0, right=(frame // 30) % 2 == 1)
                simulation.step(state, FRAME, inputs, rng)
            obstacles = [(o.position.x, o.position.y, o.kind) for o in state.obstacles]
            return tuple(state.player.position), state.dead, state.difficulty, obstacles

        assert run(42) == run(42)


# ===========================================================
# Scoring
# ===========================================================

class TestScore:

    def test_starts_at_zero(self, state):
        assert state.score == 0

    def test_half_the_distance_travelled(self, quiet_state, no_input):
        simulation.step(quiet_state, 1.0, no_input)

        assert quiet_state.score == pytest.approx(150)

    def test_never_negative(self, quiet_state):
        quiet_state.player.position.y = 100

        assert quiet_state.score == 0

    def test_monotonic_while_alive(self, state, rng, make_inputs):
        scores = []
        for frame in range(600):
            simulation.step(state, FRAME, make_inputs(jump=frame % 120 == 0), rng)
            if state.dead:
                break
            scores.append(state.score)

        assert scores == sorted(scores)
