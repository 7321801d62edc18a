from typing import Generic, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class ActionResultDTO(BaseModel, Generic[T]):
    """
    Outcome of a mutating admin action, shown once to the operator.

    Only successful actions produce a result, so `ok` is always True; failures are raised as
    domain errors and rendered as problem+json instead.
    """

    ok: bool = True
    message: str
    data: T | None = None
