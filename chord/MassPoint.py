from chord.Vec2 import Vec2


class MassPoint:
    def __init__(self, x, y, fixed=False):
        self.pos = Vec2(x, y)
        self.vel = Vec2(0.0, 0.0)
        self.acc = Vec2(0.0, 0.0)
        self.fixed = bool(fixed)

    def displace(self):
        # callers skip fixed points; nothing is checked here
        self.pos = self.pos + self.vel

    def accelerate(self):
        self.vel = self.vel + self.acc

    def relative_position(self, other):
        """Vector pointing from this point towards `other`."""
        return other.pos - self.pos

    def set_acceleration(self, vec):
        # replaces, never accumulates
        self.acc = vec

    def __repr__(self):
        return f"MassPoint(pos=({self.pos.x:.3f}, {self.pos.y:.3f}), vel=({self.vel.x:.3f}, {self.vel.y:.3f}), fixed={self.fixed})"

    def to_dict(self):
        return {
            'pos': self.pos.as_tuple(),
            'vel': self.vel.as_tuple(),
            'acc': self.acc.as_tuple(),
            'fixed': self.fixed
        }
