"""
simulation.py
-------------
The per-frame game state machine.

step() advances a SimulationState by one frame:

    control -> jump -> (respawn) -> integrate -> camera -> jump timeout
            -> recycle -> collide -> spawn

It performs no I/O and never blocks; rendering and audio react to the
resulting state and to the events it dispatches.
"""

from snoboard.core.debug.debug_logger import DebugLogger
from snoboard.core.services.event_manager import (
    ObstacleSpawnedEvent, PlayerCrashedEvent, PlayerRespawnedEvent,
)
from snoboard.core.services.input_manager import InputSnapshot
from snoboard.entities.entity_types import VisualState
from snoboard.systems.collision.collision_hitbox import entities_collide


def step(state, dt: float, inputs: InputSnapshot, rng=None, events=None):
    """
    Advance the simulation by one frame.

    Args:
        state: SimulationState, mutated in place.
        dt: Seconds since the previous frame.
        inputs: Held actions for this frame.
        rng: random.Random for spawn decisions. Same seed, same frames.
        events: Optional EventManager notified of crashes, respawns and spawns.

    Returns:
        SimulationState: The same (mutated) state.
    """
    player = state.player

    _apply_horizontal_control(state, inputs)
    _start_jump(state, inputs)

    if state.dead:
        if inputs.confirm:
            _respawn(state, events)
        return state

    player.visual_state = visual_state_for(inputs, player.jumping, alive=True)
    player.position += player.velocity * dt
    state.update_camera()

    _update_jump(state, dt)
    state.obstacles.recycle(player.position.y, state.config.recycle_distance)

    if _detect_collisions(state):
        _crash(state, events)
        return state

    state.time_since_last_obstacle += dt
    _spawn_if_due(state, rng, events)
    return state


# ===========================================================
# Control
# ===========================================================

def visual_state_for(inputs: InputSnapshot, jumping: bool, alive: bool) -> VisualState:
    """Sprite selector for the given input and flags. Right wins over left."""
    if not alive:
        return VisualState.WIPEOUT
    if inputs.right:
        return VisualState.JUMP_RIGHT if jumping else VisualState.RIGHT
    if inputs.left:
        return VisualState.JUMP_LEFT if jumping else VisualState.LEFT
    return VisualState.JUMP if jumping else VisualState.FORWARD


def _apply_horizontal_control(state, inputs):
    player = state.player
    if state.dead:
        player.velocity.x = 0
        player.visual_state = VisualState.WIPEOUT
        return

    # Checked in order, so holding both keys ends on +speed.
    velocity_x = 0.0
    if inputs.left:
        velocity_x = -state.config.speed
    if inputs.right:
        velocity_x = state.config.speed
    player.velocity.x = velocity_x


def _start_jump(state, inputs):
    player = state.player
    if inputs.jump and not state.dead and not player.jumping:
        player.jumping = True
        player.time_since_jump = 0.0
        player.velocity.y = state.config.jump_speed
        DebugLogger.trace("Jump", category="simulation")


def _update_jump(state, dt):
    player = state.player
    if not player.jumping:
        return
    player.time_since_jump += dt
    if player.time_since_jump > state.config.jump_duration:
        player.jumping = False
        player.velocity.xy = (0, state.config.speed)


# ===========================================================
# Collisions
# ===========================================================

def _detect_collisions(state) -> bool:
    """Return True if the player hits any obstacle it is not protected from."""
    player = state.player
    for obstacle in state.obstacles:
        if player.jumping and obstacle.jumpable:
            continue
        if entities_collide(player, obstacle):
            DebugLogger.trace(f"Hit {obstacle}", category="collision")
            return True
    return False


# ===========================================================
# Transitions
# ===========================================================

def _crash(state, events):
    player = state.player
    state.dead = True
    player.alive = False
    player.visual_state = VisualState.WIPEOUT
    DebugLogger.state(f"Wipeout at score {state.score:.0f}", category="simulation")
    if events is not None:
        events.dispatch(PlayerCrashedEvent(position=tuple(player.position), score=state.score))


def _respawn(state, events):
    state.respawn()
    DebugLogger.state("Respawned", category="simulation")
    if events is not None:
        events.dispatch(PlayerRespawnedEvent())


def _spawn_if_due(state, rng, events):
    spawner = state.spawner
    if not spawner.should_spawn(state.time_since_last_obstacle, state.difficulty):
        return

    obstacle = spawner.spawn(state.player.position, rng)
    state.obstacles.append(obstacle)
    state.time_since_last_obstacle = 0.0
    state.difficulty = spawner.next_difficulty(state.difficulty)

    if events is not None:
        events.dispatch(ObstacleSpawnedEvent(position=tuple(obstacle.position), kind=obstacle.kind))
