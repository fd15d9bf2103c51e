import numbers
from dataclasses import dataclass


class Site:
    """
    An input point of the diagram. Coordinates are integers; identity is the id.
    ``face`` is filled in once the sweep line reaches the site.
    """

    def __init__(self, x: int, y: int, site_id: int):
        if not isinstance(x, numbers.Integral) or not isinstance(y, numbers.Integral):
            raise TypeError(f"site coordinates must be integers, got ({x!r}, {y!r})")
        self._x = int(x)
        self._y = int(y)
        self._id = int(site_id)
        self.face = None

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def id(self) -> int:
        return self._id

    def copy(self):
        return Site(self._x, self._y, self._id)

    def __eq__(self, other):
        if not isinstance(other, Site):
            return NotImplemented
        return self._id == other._id

    def __hash__(self):
        return hash(self._id)

    def __repr__(self):
        return f"Site#{self._id}({self._x}, {self._y})"


@dataclass(frozen=True)
class Rectangle:
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self):
        if self.min_x >= self.max_x or self.min_y >= self.max_y:
            raise ValueError(f"degenerate bounding rectangle {self}")

    @classmethod
    def from_corners(cls, corner1, corner2):
        (x1, y1), (x2, y2) = corner1, corner2
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))
