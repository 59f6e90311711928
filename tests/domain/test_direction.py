"""Tests for Direction ordering and rotation."""

import pytest

from robosim.domain.direction import CLOCKWISE, STEPS, Direction


class TestOrdering:
    def test_clockwise_order(self) -> None:
        assert CLOCKWISE == (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)

    def test_values_are_upper_case_names(self) -> None:
        assert {d.value for d in Direction} == {"NORTH", "EAST", "SOUTH", "WEST"}


class TestRotation:
    @pytest.mark.parametrize(
        "start,expected",
        [
            (Direction.NORTH, Direction.WEST),
            (Direction.WEST, Direction.SOUTH),
            (Direction.SOUTH, Direction.EAST),
            (Direction.EAST, Direction.NORTH),
        ],
    )
    def test_left(self, start: Direction, expected: Direction) -> None:
        assert start.left() is expected

    @pytest.mark.parametrize(
        "start,expected",
        [
            (Direction.NORTH, Direction.EAST),
            (Direction.EAST, Direction.SOUTH),
            (Direction.SOUTH, Direction.WEST),
            (Direction.WEST, Direction.NORTH),
        ],
    )
    def test_right(self, start: Direction, expected: Direction) -> None:
        assert start.right() is expected

    @pytest.mark.parametrize("start", list(Direction))
    def test_four_lefts_is_identity(self, start: Direction) -> None:
        assert start.left().left().left().left() is start

    @pytest.mark.parametrize("start", list(Direction))
    def test_four_rights_is_identity(self, start: Direction) -> None:
        assert start.right().right().right().right() is start

    @pytest.mark.parametrize("start", list(Direction))
    def test_left_undoes_right(self, start: Direction) -> None:
        assert start.right().left() is start


class TestSteps:
    def test_unit_steps(self) -> None:
        assert Direction.NORTH.step == (0, 1)
        assert Direction.SOUTH.step == (0, -1)
        assert Direction.EAST.step == (1, 0)
        assert Direction.WEST.step == (-1, 0)

    def test_every_direction_has_a_step(self) -> None:
        assert set(STEPS) == set(Direction)


class TestFromToken:
    @pytest.mark.parametrize("token", ["NORTH", "north", "North", "nOrTh"])
    def test_case_insensitive(self, token: str) -> None:
        assert Direction.from_token(token) is Direction.NORTH

    @pytest.mark.parametrize("token", ["", "UP", "N", " NORTH", "NORTH "])
    def test_unknown_returns_none(self, token: str) -> None:
        assert Direction.from_token(token) is None

    @pytest.mark.parametrize("token", ["ſouth", "eaſt", "SOUTḪ", "ｎorth"])
    def test_non_ascii_lookalikes_return_none(self, token: str) -> None:
        assert Direction.from_token(token) is None
