import random

import pytest

from flappy_dragon.data_models import GameConfig, LocomotionState, Objective, Obstacle
from flappy_dragon.session import GameSession

STEP_MS = 50.0  # just over one frame_duration


def make_session(config=None, seed=42):
    session = GameSession(config or GameConfig(), random.Random(seed))
    # Park the hazards far away unless a test places them
    session.obstacle = Obstacle(x=80, gap_center_y=25, gap_half_size=10)
    if session.objective is not None:
        session.objective = Objective(x=60, y=2)
    return session


def test_initial_session(config, rng):
    session = GameSession(config, rng)
    assert session.score == 0
    assert session.alive
    assert session.obstacle.x == config.screen_width
    assert session.obstacle.x > session.player.x
    assert session.objective.x > session.player.x


def test_objectives_absent_when_disabled():
    session = GameSession(GameConfig.preset("diving"), random.Random(1))
    assert session.objective is None


def test_physics_waits_for_accumulated_time():
    session = make_session()
    for _ in range(4):
        session.advance(10.0, False)
    assert session.player.x == 5
    assert session.frame_accumulator == pytest.approx(40.0)
    session.advance(10.0, False)
    assert session.player.x == 6
    assert session.frame_accumulator == 0.0


def test_exactly_frame_duration_is_not_enough():
    session = make_session()
    session.advance(45.0, False)
    assert session.player.x == 5
    session.advance(0.5, False)
    assert session.player.x == 6


def test_at_most_one_step_per_tick():
    session = make_session()
    session.advance(10_000.0, False)
    assert session.player.x == 6
    assert session.steps == 1
    assert session.frame_accumulator == 0.0


def test_x_advances_once_per_fixed_step():
    session = make_session()
    for tick in range(12):
        before = session.player.x
        stepped_before = session.steps
        session.advance(30.0, False)
        assert session.player.x - before == session.steps - stepped_before


def test_falling_into_floor_kills_in_same_tick(config):
    session = make_session()
    session.player.y = config.screen_height - 1
    session.player.velocity = config.terminal_falling_velocity
    assert session.advance(STEP_MS, False) is False
    assert not session.alive
    assert session.player.y >= config.screen_height


def test_dead_session_stops_advancing():
    session = make_session()
    session.alive = False
    session.advance(STEP_MS, True)
    assert session.player.x == 5


def test_obstacle_collision_kills():
    session = make_session()
    session.obstacle = Obstacle(x=6, gap_center_y=40, gap_half_size=5)
    session.advance(STEP_MS, False)
    assert session.player.x == 6
    assert not session.alive


def test_passing_obstacle_scores_once_and_respawns_ahead():
    session = make_session()
    session.obstacle = Obstacle(x=6, gap_center_y=25, gap_half_size=10)
    session.advance(STEP_MS, False)
    assert session.alive
    assert session.score == 0

    session.advance(STEP_MS, False)
    assert session.score == 1
    assert session.player.score_flash_frame == 0
    assert session.obstacle.x == session.player.x + session.config.screen_width
    assert session.obstacle.gap_half_size == (20 - 1) // 2

    session.advance(STEP_MS, False)
    assert session.score == 1
    assert session.player.score_flash_frame == 1


def test_collecting_objective_scores_and_resets_flash():
    session = make_session()
    session.objective = Objective(x=6, y=25)
    session.advance(STEP_MS, False)
    assert session.score == 1
    assert session.player.score_flash_frame == 0
    assert session.objective.x > session.player.x


def test_missed_objective_is_replaced_without_score():
    session = make_session()
    session.objective = Objective(x=6, y=40)
    session.advance(STEP_MS, False)
    assert session.objective.x == 6
    session.advance(STEP_MS, False)
    assert session.score == 0
    assert session.objective.x > session.player.x


def test_input_flaps_even_between_fixed_steps():
    session = make_session()
    session.advance(10.0, True)
    assert session.player.x == 5
    assert session.player.state == LocomotionState.FLAPPING
    assert session.holding_dive_input


def test_holding_input_turns_into_dive_at_threshold(config):
    session = make_session()
    # The first held step enters Flapping, which restarts the dive count
    session.advance(STEP_MS, True)
    assert session.player.state == LocomotionState.FLAPPING
    assert session.player.dive_counter == 0

    for expected in range(1, config.diving_hold_length):
        session.advance(STEP_MS, True)
        assert session.player.dive_counter == expected
        assert session.player.state == LocomotionState.FLAPPING

    session.advance(STEP_MS, True)
    assert session.player.dive_counter == config.diving_hold_length
    assert session.player.state == LocomotionState.DIVING


def test_no_dive_when_diving_disabled():
    session = make_session(GameConfig.preset("flappy"))
    for _ in range(6):
        session.advance(STEP_MS, True)
        assert session.player.state != LocomotionState.DIVING


def test_release_while_diving_forces_falling():
    session = make_session()
    for _ in range(4):
        session.advance(STEP_MS, True)
    assert session.player.state == LocomotionState.DIVING

    session.advance(STEP_MS, False)
    assert session.player.state == LocomotionState.FALLING
    assert session.player.dive_counter == 0
    assert not session.holding_dive_input


def test_release_while_flapping_lets_flap_expire(config):
    session = make_session()
    session.advance(STEP_MS, True)
    session.advance(STEP_MS, False)
    assert session.player.state == LocomotionState.FLAPPING
    assert session.player.flap_frame == 1
    assert not session.holding_dive_input

    for _ in range(config.flap_duration - 2):
        session.advance(STEP_MS, False)
    assert session.player.state == LocomotionState.FLAPPING
    session.advance(STEP_MS, False)
    assert session.player.state == LocomotionState.FALLING


def test_single_held_step_then_release_does_not_count_on():
    session = make_session()
    session.advance(STEP_MS, True)
    session.advance(STEP_MS, False)
    assert session.player.dive_counter == 0
    assert session.player.state == LocomotionState.FLAPPING


def test_release_before_dive_threshold_keeps_flapping(config):
    session = make_session()
    for _ in range(config.diving_hold_length):
        session.advance(STEP_MS, True)
    assert session.player.state == LocomotionState.FLAPPING
    assert session.player.dive_counter == config.diving_hold_length - 1

    session.advance(STEP_MS, False)
    assert session.player.state == LocomotionState.FLAPPING
    assert session.player.dive_counter == config.diving_hold_length - 1
    assert session.player.flap_frame == config.diving_hold_length


def test_latch_clears_on_every_fixed_step():
    session = make_session()
    session.advance(STEP_MS, True)
    assert not session.holding_dive_input
    session.advance(10.0, True)
    assert session.holding_dive_input


def test_release_between_fixed_steps_keeps_latch():
    session = make_session()
    session.advance(10.0, True)
    session.advance(10.0, False)
    assert session.holding_dive_input
    session.advance(STEP_MS, False)
    assert not session.holding_dive_input


def test_hazards_never_fall_behind_the_player():
    session = GameSession(GameConfig(), random.Random(5))
    for tick in range(300):
        if not session.advance(STEP_MS, tick % 5 == 0):
            break
        # Equal only on the tick the player stands in the hazard column
        assert session.obstacle.x >= session.player.x
        assert session.objective.x >= session.player.x
        assert session.player.y >= 0
