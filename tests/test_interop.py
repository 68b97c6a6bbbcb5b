import pytest
from returns.maybe import Nothing as ReturnsNothing
from returns.maybe import Some
from returns.result import Failure, Success

from monado.interop import from_returns, maybe_from_returns, maybe_to_returns, to_returns
from monado.monad.maybe import NOTHING, Just
from monado.monad.result import Err, Ok


def test_result_conversions():
    assert to_returns(Ok(1)) == Success(1)
    assert to_returns(Err("bad")) == Failure("bad")
    assert from_returns(Success(1)) == Ok(1)
    assert from_returns(Failure("bad")) == Err("bad")


def test_maybe_conversions():
    assert maybe_to_returns(Just(1)) == Some(1)
    assert maybe_to_returns(NOTHING) is ReturnsNothing
    assert maybe_from_returns(Some(1)) == Just(1)
    assert maybe_from_returns(ReturnsNothing) == NOTHING


def test_foreign_values_are_rejected():
    with pytest.raises(TypeError, match="Expected a returns Result"):
        from_returns(Ok(1))
    with pytest.raises(TypeError, match="Expected a returns Maybe"):
        maybe_from_returns(None)
