from pydantic import BaseModel, ConfigDict, Field


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""
    model_config = ConfigDict(frozen=True, extra="forbid")


class CodeExample(ImmutableModel):
    """A real usage of a monad, shown as the code before and after adopting it."""
    title: str = Field(..., min_length=1)
    location: str
    problem: str
    without_monad: str | None = Field(
        default=None, description="Traditional version; some examples only show the monadic one."
    )
    with_monad: str
    benefits: tuple[str, ...] = Field(default_factory=tuple)


class Comparison(ImmutableModel):
    """The same scenario solved with and without monads."""
    scenario: str
    without_monads: str
    with_monads: str
    improvements: tuple[str, ...] = Field(default_factory=tuple)


class Catalog(ImmutableModel):
    maybe: tuple[CodeExample, ...]
    result: tuple[CodeExample, ...]
    comparison: Comparison


__all__ = ["Catalog", "CodeExample", "Comparison"]
