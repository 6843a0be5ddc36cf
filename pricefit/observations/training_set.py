"""
Bounded, editable collection of observations.

TrainingSet is what a data-entry front end edits: samples are appended,
corrected in place, or removed by id, and the whole set is handed to
fit() when the user asks for a model. It holds nothing but the samples;
persisting them is the caller's business (to_records / from_records give
plain dicts to work with).

Usage:
    ts = TrainingSet()
    obs = ts.add(120, 250_000)
    ts.update(obs.id, 125, 255_000)
    ts.remove(obs.id)
"""

from __future__ import annotations

import uuid
import warnings
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pricefit.config import DEFAULT_CAPACITY
from pricefit.core.exceptions import CapacityError, ObservationNotFoundError
from pricefit.observations.observation import Observation
from pricefit.observations.parsing import validate_area, validate_price

if TYPE_CHECKING:
    import pandas as pd


def _new_id() -> str:
    return uuid.uuid4().hex[:21]


class TrainingSet:
    """
    Ordered, capacity-limited list of validated observations.

    Every value entering the set passes validate_area / validate_price.
    Ids are unique within a set; insertion order is preserved and is the
    order fit() accumulates in.

    Args:
        observations: Initial observations (ids assigned where missing)
        capacity: Maximum number of observations
        id_factory: Callable producing fresh ids
    """

    def __init__(
        self,
        observations: Iterable[Observation] = (),
        *,
        capacity: int = DEFAULT_CAPACITY,
        id_factory: Callable[[], str] = _new_id,
    ):
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._id_factory = id_factory
        self._items: list[Observation] = []
        for obs in observations:
            self._append(obs.x, obs.y, obs.id)

    # === Collection protocol ===

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Observation]:
        return iter(tuple(self._items))

    def __contains__(self, observation_id: object) -> bool:
        return any(obs.id == observation_id for obs in self._items)

    def __repr__(self) -> str:
        return f"TrainingSet(n={len(self)}, capacity={self._capacity})"

    # === Properties ===

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    @property
    def observations(self) -> tuple[Observation, ...]:
        """Snapshot of the current observations in insertion order."""
        return tuple(self._items)

    # === Editing ===

    def add(self, area: float, price: float) -> Observation:
        """
        Validate and append a new observation.

        Returns:
            The stored Observation, with its id assigned

        Raises:
            ValidationError: If area or price is out of range
            CapacityError: If the set already holds `capacity` observations
        """
        return self._append(area, price, None)

    def update(self, observation_id: str, area: float, price: float) -> Observation:
        """
        Replace the values of an existing observation, keeping its position.

        Allowed when the set is full.

        Raises:
            ObservationNotFoundError: If no observation has this id
            ValidationError: If area or price is out of range
        """
        index = self._index(observation_id)
        area = validate_area(area)
        price = validate_price(price)
        updated = self._items[index].with_values(area, price)
        self._items[index] = updated
        return updated

    def remove(self, observation_id: str) -> Observation:
        """
        Remove an observation and return it.

        Raises:
            ObservationNotFoundError: If no observation has this id
        """
        return self._items.pop(self._index(observation_id))

    def get(self, observation_id: str) -> Observation:
        """
        Look up an observation by id.

        Raises:
            ObservationNotFoundError: If no observation has this id
        """
        return self._items[self._index(observation_id)]

    def clear(self) -> None:
        """Remove every observation."""
        self._items.clear()

    # === Conversion ===

    def to_arrays(self) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """Return (x, y) as float64 arrays in insertion order."""
        x = np.array([obs.x for obs in self._items], dtype=np.float64)
        y = np.array([obs.y for obs in self._items], dtype=np.float64)
        return x, y

    def to_records(self) -> list[dict[str, object]]:
        """Return [{'id', 'area', 'price'}, ...] in insertion order."""
        return [obs.to_record() for obs in self._items]

    @classmethod
    def from_records(
        cls,
        records: Iterable[Mapping[str, Any]],
        *,
        capacity: int = DEFAULT_CAPACITY,
        id_factory: Callable[[], str] = _new_id,
    ) -> TrainingSet:
        """
        Rebuild a set from plain records, e.g. ones loaded from storage.

        Each record needs 'area' and 'price'; 'id' is optional. Duplicate ids
        are reassigned with a UserWarning.

        Raises:
            KeyError: If a record lacks 'area' or 'price'
            ValidationError: If a value is out of range
            CapacityError: If there are more records than capacity
        """
        ts = cls(capacity=capacity, id_factory=id_factory)
        for record in records:
            ts._append(record['area'], record['price'], record.get('id'))
        return ts

    @classmethod
    def from_dataframe(
        cls,
        df: 'pd.DataFrame',
        *,
        area: str = 'area',
        price: str = 'price',
        capacity: int = DEFAULT_CAPACITY,
    ) -> TrainingSet:
        """Build a set from two columns of a pandas DataFrame."""
        ts = cls(capacity=capacity)
        areas = df[area].to_numpy(dtype=np.float64)
        prices = df[price].to_numpy(dtype=np.float64)
        for a, p in zip(areas, prices):
            ts._append(a, p, None)
        return ts

    # === Internals ===

    def _index(self, observation_id: str) -> int:
        for i, obs in enumerate(self._items):
            if obs.id == observation_id:
                return i
        raise ObservationNotFoundError(
            f"No observation with id {observation_id!r}",
            observation_id=observation_id,
        )

    def _append(self, area: float, price: float, observation_id: str | None) -> Observation:
        if self.is_full:
            raise CapacityError(
                f"Maximum of {self._capacity} entries reached.",
                capacity=self._capacity,
            )
        area = validate_area(area)
        price = validate_price(price)

        if observation_id is not None and observation_id in self:
            warnings.warn(
                f"Duplicate observation id {observation_id!r}; assigning a new id.",
                UserWarning,
                stacklevel=3,
            )
            observation_id = None
        if observation_id is None:
            observation_id = self._id_factory()

        obs = Observation(x=area, y=price, id=observation_id)
        self._items.append(obs)
        return obs
