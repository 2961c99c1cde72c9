import math


class Vec2:
    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def magnitude(self):
        return math.sqrt(self.x * self.x + self.y * self.y)

    def scale(self, r):
        """Scale this vector in place. Nothing is returned."""
        self.x *= r
        self.y *= r

    def copy(self):
        return Vec2(self.x, self.y)

    def as_tuple(self):
        return (self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x}, {self.y})"
