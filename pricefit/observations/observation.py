"""
The Observation value type.

An Observation is one (area, price) training sample. It is immutable and
compares by value; the optional id is bookkeeping for collections that edit
samples in place and never participates in fitting.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Observation:
    """
    One training sample.
    
    Attributes:
        x: Predictor value (floor area)
        y: Response value (price)
        id: Identifier assigned by a TrainingSet, or None
    """
    x: float
    y: float
    id: str | None = field(default=None, compare=False)
    
    @property
    def area(self) -> float:
        return self.x
    
    @property
    def price(self) -> float:
        return self.y
    
    def with_values(self, area: float, price: float) -> Observation:
        """Copy with new values, keeping the id."""
        return replace(self, x=float(area), y=float(price))
    
    def to_record(self) -> dict[str, object]:
        """Plain-dict form {id, area, price}."""
        return {'id': self.id, 'area': self.x, 'price': self.y}
