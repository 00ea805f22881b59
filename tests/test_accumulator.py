from __future__ import annotations

import math
from unittest import mock

import pytest

from clipsolver.config import SolverConfig
from clipsolver.core.accumulator import Accumulator, build_accumulator, solve_series
from clipsolver.core.factory import make_transform
from clipsolver.core.message import Observation
from clipsolver.core.transforms import LogTransform, SquareTransform, ValueTransform
from clipsolver.errors import DomainError, TransformOwnershipError, UnsupportedVariant


def make_mock_transform(derived: float = 0.0) -> mock.MagicMock:
    t = mock.create_autospec(ValueTransform, instance=True)
    t.derive.return_value = derived
    return t


def test_update_forwards_observation_to_transform() -> None:
    t = make_mock_transform()
    acc = Accumulator(30.0, t)
    acc.update(Observation(42.0))
    t.update.assert_called_once_with(Observation(42.0))
    assert acc.latest == Observation(42.0)


def test_solve_clips_value_above_ceiling() -> None:
    t = make_mock_transform(derived=40.0)
    acc = Accumulator(30.0, t)
    acc.update(42.0)
    assert acc.solve() == 30.0
    t.derive.assert_called_once_with()


def test_solve_passes_value_below_ceiling() -> None:
    t = make_mock_transform(derived=15.0)
    acc = Accumulator(30.0, t)
    acc.update(20.0)
    assert acc.solve() == 15.0


def test_square_below_ceiling() -> None:
    acc = Accumulator(42, make_transform("square"))
    acc.update(6)
    assert acc.solve() == 36.0


def test_square_above_ceiling() -> None:
    acc = Accumulator(30, make_transform("square"))
    acc.update(7)
    assert acc.solve() == 30.0


def test_log_unclipped() -> None:
    acc = Accumulator(30, make_transform("log"))
    acc.update(20)
    assert acc.solve() == pytest.approx(math.log(20))
    assert acc.solve() == pytest.approx(2.9957, abs=1e-4)


def test_invalid_variant_fails_construction() -> None:
    with pytest.raises(UnsupportedVariant):
        Accumulator(30, make_transform("fibonacci"))


@pytest.mark.parametrize("ceiling", [-5.0, 0.0, 1.0, 10.0, 100.0])
def test_solve_never_exceeds_ceiling(ceiling: float) -> None:
    acc = Accumulator(ceiling, SquareTransform())
    for v in range(10):
        acc.update(v)
        assert acc.solve() == min(ceiling, float(v * v))
        assert acc.solve() <= ceiling


def test_solve_is_idempotent() -> None:
    acc = Accumulator(100.0, LogTransform())
    acc.update(7.5)
    first = acc.solve()
    assert acc.solve() == first
    assert acc.latest == Observation(7.5)


def test_solve_before_update_uses_default_observation() -> None:
    assert Accumulator(10.0, SquareTransform()).solve() == 0.0
    with pytest.raises(DomainError):
        Accumulator(10.0, LogTransform()).solve()


def test_log_domain_error_propagates() -> None:
    acc = Accumulator(10.0, LogTransform())
    acc.update(-3)
    with pytest.raises(DomainError):
        acc.solve()


def test_ceiling_is_read_only() -> None:
    acc = Accumulator(5, SquareTransform())
    assert acc.ceiling == 5.0
    with pytest.raises(AttributeError):
        acc.ceiling = 10.0  # type: ignore[misc]


def test_transform_cannot_be_shared() -> None:
    t = SquareTransform()
    first = Accumulator(10.0, t)
    assert first.transform is t
    with pytest.raises(TransformOwnershipError):
        Accumulator(20.0, t)


def test_missing_transform_rejected() -> None:
    with pytest.raises(ValueError):
        Accumulator(10.0, None)  # type: ignore[arg-type]


def test_independent_accumulators_do_not_interfere() -> None:
    square = Accumulator(42.0, make_transform("square"))
    log = Accumulator(42.0, make_transform("log"))
    square.update(3)
    log.update(math.e)
    assert square.solve() == 9.0
    assert log.solve() == pytest.approx(1.0)


def test_build_accumulator_from_config() -> None:
    acc = build_accumulator(SolverConfig(variant="log", ceiling=30.0))
    assert isinstance(acc.transform, LogTransform)
    assert acc.ceiling == 30.0


def test_build_accumulator_unknown_variant() -> None:
    with pytest.raises(UnsupportedVariant):
        build_accumulator(SolverConfig(variant="cube"))


def test_solve_series_square() -> None:
    acc = build_accumulator(SolverConfig(variant="square", ceiling=42.0))
    results = solve_series(acc, range(10))
    assert [x for x, _ in results] == [float(i) for i in range(10)]
    assert [y for _, y in results] == [0.0, 1.0, 4.0, 9.0, 16.0, 25.0, 36.0, 42.0, 42.0, 42.0]


def test_failed_construction_leaves_transform_unowned() -> None:
    t = SquareTransform()
    with pytest.raises(ValueError):
        Accumulator("not-a-number", t)  # type: ignore[arg-type]
    acc = Accumulator(10.0, t)
    assert acc.transform is t
