"""Tests for Ok and Err."""

from __future__ import annotations

import dataclasses

import pytest

from usecase_engine.result import Err, Ok, is_result


class TestOk:
    def test_default_value_is_none(self) -> None:
        assert Ok().value is None

    def test_predicates(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_frozen(self) -> None:
        result = Ok({"x": 1})
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.value = 2  # type: ignore[misc]

    def test_to_dict(self) -> None:
        assert Ok({"x": 1}).to_dict() == {"type": "Ok", "value": {"x": 1}}


class TestErr:
    def test_default_detail_is_none(self) -> None:
        assert Err().detail is None

    def test_predicates(self) -> None:
        assert Err("bad").is_ok() is False
        assert Err("bad").is_err() is True

    def test_to_dict(self) -> None:
        assert Err("bad").to_dict() == {"type": "Err", "detail": "bad"}


class TestNoCoercion:
    def test_variants_with_same_payload_differ(self) -> None:
        assert Ok("x") != Err("x")
        assert Ok() != Err()

    def test_equality_within_variant(self) -> None:
        assert Err("bad") == Err("bad")
        assert Ok({"x": 1}) == Ok({"x": 1})

    def test_is_result(self) -> None:
        assert is_result(Ok())
        assert is_result(Err())
        assert not is_result(None)
        assert not is_result({"ok": True})
