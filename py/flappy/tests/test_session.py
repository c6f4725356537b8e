"""
Tests for the session state machine.
"""

import random

import pytest

from flappy.difficulty import difficulty_for
from flappy.events import Event
from flappy.session import GameState, Session


@pytest.fixture
def session(config) -> Session:
    return Session(config, rng=random.Random(3))


@pytest.fixture
def floating_session(floating_config) -> Session:
    return Session(floating_config, rng=random.Random(3))


def place_pair(session: Session, gap_y: float, x: float):
    top, bottom = session.pipes.spawn_pair(gap_y, session.speed)
    top.x = bottom.x = x
    return top, bottom


class TestIdle:
    """Test cases for a session that has not started."""

    def test_initial_state(self, session):
        """Test that a new session is idle at base difficulty."""
        assert session.state is GameState.IDLE
        assert not session.started
        assert not session.over
        assert session.score == 0
        assert session.best_score == 0
        assert session.speed == 200
        assert session.spawn_interval_ms == 1400
        assert session.bird.allow_gravity is False

    def test_nothing_happens_while_idle(self, session):
        """Test that time passing while idle spawns nothing and moves nothing."""
        y = session.bird.y
        for _ in range(300):
            session.update(1 / 60)
        assert session.bird.y == y
        assert len(session.pipes) == 0

    def test_score_ignored_while_idle(self, session):
        """Test that scoring before the start is a no-op."""
        session.add_score(3)
        assert session.score == 0

    def test_game_over_ignored_while_idle(self, session):
        """Test that a collision before the start does not end the session."""
        session.game_over()
        assert session.state is GameState.IDLE


class TestStart:
    """Test cases for the IDLE to RUNNING transition."""

    def test_first_flap_starts(self, session):
        """Test that the first flap starts play, gravity and the spawn timer."""
        session.handle(Event.FLAP)
        assert session.state is GameState.RUNNING
        assert session.bird.allow_gravity is True
        assert session.bird.velocity_y == -320
        assert session.spawner.timer is not None
        assert session.spawner.timer.delay == 1400

    def test_flap_while_running(self, session):
        """Test that further flaps only reset the vertical velocity."""
        session.flap()
        session.bird.velocity_y = 250
        session.flap()
        assert session.bird.velocity_y == -320
        assert session.state is GameState.RUNNING
        assert len(session.scheduler.events) == 1

    def test_restart_event_ignored(self, session):
        """Test that the session leaves restarts to the controller."""
        session.handle(Event.RESTART)
        assert session.state is GameState.IDLE

    def test_pipes_spawn_after_interval(self, floating_session):
        """Test that the first pair appears one interval after the start."""
        floating_session.flap()
        floating_session.update(1.0)
        assert len(floating_session.pipes) == 0
        floating_session.update(0.4)
        assert len(floating_session.pipes) == 2


class TestScoring:
    """Test cases for passing pipes and difficulty scaling."""

    def test_passing_a_pair_scores_one(self, floating_session):
        """Test that a pair scores once when its trailing edge passes the bird."""
        floating_session.flap()
        top, bottom = place_pair(floating_session, 270, 140 - 64 - 1)
        floating_session.update(0.0)
        assert floating_session.score == 1
        assert floating_session.best_score == 1
        assert bottom.scored and not top.scored
        floating_session.update(0.0)
        assert floating_session.score == 1

    def test_difficulty_after_five(self, session):
        """Test that reaching five speeds up pipes and shortens the interval."""
        session.flap()
        top, bottom = place_pair(session, 300, 600)
        session.add_score(5)
        assert session.speed == 215
        assert session.spawn_interval_ms == 1340
        assert session.spawner.timer.delay == 1340
        assert top.velocity_x == bottom.velocity_x == -215

    def test_difficulty_after_thirty(self, session):
        """Test the difficulty after thirty points."""
        session.flap()
        session.add_score(30)
        assert (session.speed, session.spawn_interval_ms) == (290, 1040)
        assert (session.speed, session.spawn_interval_ms) == difficulty_for(30, session.config)

    def test_each_crossing_fires_once(self, session):
        """Test that point-by-point and bulk scoring agree."""
        session.flap()
        for _ in range(12):
            session.add_score(1)
        assert (session.speed, session.spawn_interval_ms) == difficulty_for(12, session.config)


class TestGameOver:
    """Test cases for the RUNNING to OVER transition."""

    def test_ground_collision(self, session):
        """Test that touching the ground ends the session and freezes everything."""
        session.flap()
        place_pair(session, 300, 600)
        session.bird.y = session.config.ground_top - 10
        session.update(0.0)
        assert session.state is GameState.OVER
        assert all(pipe.velocity_x == 0 for pipe in session.pipes)
        assert len(session.pipes) == 2
        assert session.bird.velocity_y == 0
        assert session.bird.allow_gravity is False
        assert session.spawner.timer.removed
        assert session.bird.bottom == session.config.ground_top

    def test_pipe_collision(self, session):
        """Test that touching a pipe ends the session."""
        session.flap()
        place_pair(session, 150, 130)
        session.update(0.0)
        assert session.over

    def test_flying_through_the_gap(self, floating_session):
        """Test that a bird inside the gap does not collide."""
        floating_session.flap()
        place_pair(floating_session, 270, 130)
        floating_session.update(0.0)
        assert floating_session.running

    def test_game_over_is_idempotent(self, session):
        """Test that a second game over changes nothing."""
        session.flap()
        place_pair(session, 300, 600)
        session.game_over()
        snapshot = (session.state, session.score, session.bird.y,
                    [(p.x, p.velocity_x) for p in session.pipes])
        session.game_over()
        assert (session.state, session.score, session.bird.y,
                [(p.x, p.velocity_x) for p in session.pipes]) == snapshot

    def test_no_spawns_after_game_over(self, session):
        """Test that the spawn timer is dead after the crash."""
        session.flap()
        session.game_over()
        for _ in range(10):
            session.update(1.0)
        assert len(session.pipes) == 0
        assert session.spawner.spawn() is None

    def test_input_ignored_when_over(self, session):
        """Test that flaps and points after the crash are no-ops."""
        session.flap()
        session.add_score(2)
        session.game_over()
        session.handle(Event.FLAP)
        session.add_score(1)
        assert session.bird.velocity_y == 0
        assert session.score == 2
        assert session.over

    def test_frozen_world_stays_put(self, session):
        """Test that nothing moves after the crash."""
        session.flap()
        place_pair(session, 300, 600)
        session.game_over()
        positions = [(p.x, p.y) for p in session.pipes] + [(session.bird.x, session.bird.y)]
        session.update(0.5)
        assert [(p.x, p.y) for p in session.pipes] + [(session.bird.x, session.bird.y)] == positions


class TestLogging:
    """Test cases for state-change logging."""

    def test_transitions_are_logged(self, config):
        """Test that start, difficulty and game over are reported."""
        messages = []
        session = Session(config, rng=random.Random(1), log=messages.append)
        session.flap()
        session.add_score(5)
        session.game_over()
        assert messages[0] == "Session started"
        assert "Difficulty up at 5" in messages[1]
        assert "Game over with score 5" in messages[2]


if __name__ == "__main__":
    pytest.main([__file__])
