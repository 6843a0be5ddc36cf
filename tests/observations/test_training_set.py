"""
Tests for TrainingSet.

Validates:
    - add / update / remove / get by id
    - capacity limit (update still allowed when full)
    - validation of every value entering the set
    - record and DataFrame round trips
"""

import numpy as np
import pytest

from pricefit.core.exceptions import (
    CapacityError,
    ObservationNotFoundError,
    ValidationError,
)
from pricefit.observations import Observation, TrainingSet


@pytest.fixture
def training_set(sequential_ids):
    return TrainingSet(id_factory=sequential_ids)


# ═══════════════════════════════════════════════════════════════════════
# Observation
# ═══════════════════════════════════════════════════════════════════════


class TestObservation:

    def test_aliases(self):
        obs = Observation(120.0, 250_000.0)
        assert obs.area == 120.0
        assert obs.price == 250_000.0

    def test_id_ignored_in_equality(self):
        assert Observation(1.0, 2.0, id="a") == Observation(1.0, 2.0, id="b")

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Observation(1.0, 2.0).x = 3.0

    def test_with_values_keeps_id(self):
        obs = Observation(1.0, 2.0, id="a").with_values(3, 4)
        assert (obs.x, obs.y, obs.id) == (3.0, 4.0, "a")


# ═══════════════════════════════════════════════════════════════════════
# Editing
# ═══════════════════════════════════════════════════════════════════════


class TestEditing:

    def test_add_assigns_id(self, training_set):
        obs = training_set.add(120, 250_000)
        assert obs.id == "id-0"
        assert len(training_set) == 1
        assert "id-0" in training_set

    def test_insertion_order(self, training_set):
        training_set.add(3, 30)
        training_set.add(1, 10)
        assert [o.x for o in training_set] == [3.0, 1.0]

    def test_update_in_place(self, training_set):
        first = training_set.add(100, 1_000)
        training_set.add(200, 2_000)
        updated = training_set.update(first.id, 150, 1_500)
        assert updated.id == first.id
        assert training_set.observations[0] == Observation(150, 1_500)

    def test_remove(self, training_set):
        obs = training_set.add(100, 1_000)
        removed = training_set.remove(obs.id)
        assert removed == obs
        assert len(training_set) == 0

    def test_get(self, training_set):
        obs = training_set.add(100, 1_000)
        assert training_set.get(obs.id) is obs

    @pytest.mark.parametrize("method, args", [
        ("get", ()),
        ("remove", ()),
        ("update", (1, 1)),
    ])
    def test_unknown_id(self, training_set, method, args):
        with pytest.raises(ObservationNotFoundError) as exc_info:
            getattr(training_set, method)("nope", *args)
        assert exc_info.value.observation_id == "nope"

    def test_clear(self, training_set):
        training_set.add(1, 1)
        training_set.clear()
        assert len(training_set) == 0

    def test_iteration_is_snapshot(self, training_set):
        training_set.add(1, 1)
        training_set.add(2, 2)
        for obs in training_set:
            training_set.remove(obs.id)
        assert len(training_set) == 0


# ═══════════════════════════════════════════════════════════════════════
# Validation and capacity
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_add_rejects_bad_area(self, training_set):
        with pytest.raises(ValidationError, match="Area"):
            training_set.add(0, 1_000)
        assert len(training_set) == 0

    def test_update_rejects_bad_price(self, training_set):
        obs = training_set.add(100, 1_000)
        with pytest.raises(ValidationError, match="Price"):
            training_set.update(obs.id, 100, -1)
        assert training_set.get(obs.id).price == 1_000.0


class TestCapacity:

    def test_default_capacity(self):
        assert TrainingSet().capacity == 50

    def test_full(self, sequential_ids):
        ts = TrainingSet(capacity=2, id_factory=sequential_ids)
        ts.add(1, 1)
        ts.add(2, 2)
        assert ts.is_full
        with pytest.raises(CapacityError, match="Maximum of 2 entries reached.") as exc_info:
            ts.add(3, 3)
        assert exc_info.value.capacity == 2

    def test_update_allowed_when_full(self, sequential_ids):
        ts = TrainingSet(capacity=1, id_factory=sequential_ids)
        obs = ts.add(1, 1)
        ts.update(obs.id, 5, 5)
        assert ts.get(obs.id).x == 5.0

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            TrainingSet(capacity=0)


# ═══════════════════════════════════════════════════════════════════════
# Conversion
# ═══════════════════════════════════════════════════════════════════════


class TestConversion:

    def test_to_arrays(self, training_set):
        training_set.add(1, 10)
        training_set.add(2, 20)
        x, y = training_set.to_arrays()
        np.testing.assert_array_equal(x, [1.0, 2.0])
        np.testing.assert_array_equal(y, [10.0, 20.0])

    def test_records_round_trip(self, training_set):
        training_set.add(1, 10)
        training_set.add(2, 20)
        records = training_set.to_records()
        assert records[0] == {'id': 'id-0', 'area': 1.0, 'price': 10.0}
        rebuilt = TrainingSet.from_records(records)
        assert rebuilt.to_records() == records

    def test_from_records_without_ids(self, sequential_ids):
        ts = TrainingSet.from_records(
            [{'area': 1, 'price': 2}, {'area': 3, 'price': 4}],
            id_factory=sequential_ids,
        )
        assert [o.id for o in ts] == ['id-0', 'id-1']

    def test_from_records_duplicate_ids_warn(self, sequential_ids):
        records = [
            {'id': 'a', 'area': 1, 'price': 2},
            {'id': 'a', 'area': 3, 'price': 4},
        ]
        with pytest.warns(UserWarning, match="Duplicate observation id"):
            ts = TrainingSet.from_records(records, id_factory=sequential_ids)
        assert [o.id for o in ts] == ['a', 'id-0']

    def test_from_records_missing_field(self):
        with pytest.raises(KeyError):
            TrainingSet.from_records([{'area': 1}])

    def test_from_records_over_capacity(self):
        records = [{'area': i, 'price': i} for i in range(1, 4)]
        with pytest.raises(CapacityError):
            TrainingSet.from_records(records, capacity=2)

    def test_from_dataframe(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({'sqm': [50, 100], 'usd': [100_000, 200_000]})
        ts = TrainingSet.from_dataframe(df, area='sqm', price='usd')
        assert [(o.area, o.price) for o in ts] == [(50.0, 100_000.0), (100.0, 200_000.0)]
