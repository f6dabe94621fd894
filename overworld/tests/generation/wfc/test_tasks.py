"""Tests for background WFC solves."""

import asyncio

import pytest

from overworld.generation.wfc import Direction, SolveOutcome, SolveTask, TileSet, TileVariant, WFCSolver


def incompatible_tileset() -> TileSet:
    return TileSet([
        TileVariant(tile_id, sockets={d: [(f"{tile_id}_{d.name}", 1)] for d in Direction})
        for tile_id in ("a", "b")
    ])


class TestSolveTask:
    """Tests for SolveTask."""

    def test_poll_before_start(self, meadow):
        task = SolveTask(lambda: WFCSolver(2, 2, meadow, seed=0))
        assert not task.started
        assert task.poll() is None

    @pytest.mark.asyncio
    async def test_solves_in_background(self, meadow):
        task = SolveTask(lambda: WFCSolver(6, 6, meadow, seed=1))
        task.start()
        assert task.started

        outcome = await task.wait(poll_interval=0.01)

        assert outcome.solved
        assert not outcome.is_contradiction
        assert not outcome.failed
        assert len(outcome.tiles) == 36
        assert outcome.contradiction_at is None
        assert task.poll() is outcome

    @pytest.mark.asyncio
    async def test_matches_foreground_solve(self, meadow):
        """A background solve gives the same tiles as solving inline."""
        outcome = await SolveTask(lambda: WFCSolver(5, 5, meadow, seed=8)).wait()
        inline = WFCSolver(5, 5, meadow, seed=8).solve()
        assert [v.id for _, v in outcome.tiles] == [v.id for _, v in inline]

    @pytest.mark.asyncio
    async def test_contradiction_outcome(self):
        task = SolveTask(lambda: WFCSolver(2, 1, incompatible_tileset(), seed=0))
        outcome = await task.wait(poll_interval=0.01)
        assert outcome.is_contradiction
        assert outcome.tiles is None
        assert outcome.contradiction_at == (1, 0)
        assert not outcome.timed_out

    @pytest.mark.asyncio
    async def test_timeout_reported_as_failure(self, meadow):
        """An expired timeout yields a failed outcome, never partial tiles."""
        task = SolveTask(lambda: WFCSolver(150, 150, meadow, seed=0), timeout=0.01)
        outcome = await task.wait(poll_interval=0.01)
        assert outcome.timed_out
        assert outcome.is_contradiction
        assert outcome.failed
        assert outcome.tiles is None

    @pytest.mark.asyncio
    async def test_cancel(self, meadow):
        task = SolveTask(lambda: WFCSolver(150, 150, meadow, seed=0))
        task.start()
        task.cancel()
        outcome = await task.wait(poll_interval=0.01)
        assert outcome.cancelled
        assert outcome.tiles is None
        assert outcome.failed
        assert not outcome.is_contradiction

    @pytest.mark.asyncio
    async def test_start_twice_is_ignored(self, meadow):
        task = SolveTask(lambda: WFCSolver(2, 2, meadow, seed=0))
        task.start()
        task.start()
        outcome = await task.wait()
        assert outcome.solved


class TestSolveOutcome:
    """Tests for SolveOutcome flags."""

    def test_cancelled_is_not_a_contradiction(self):
        outcome = SolveOutcome(cancelled=True)
        assert outcome.failed
        assert not outcome.is_contradiction

    def test_timeout_counts_as_contradiction(self):
        outcome = SolveOutcome(timed_out=True)
        assert outcome.failed
        assert outcome.is_contradiction

    def test_contradiction_cell(self):
        outcome = SolveOutcome(contradiction_at=(3, 1))
        assert outcome.is_contradiction
        assert not outcome.solved
