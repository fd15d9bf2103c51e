import math


class Vertex:
    def __init__(self, x: float, y: float):
        self.x = x
        self.y = y
        self.incident_edge = None  # 任一以该顶点为起点的半边

    def __repr__(self):
        return f"Vertex({self.x:.2f}, {self.y:.2f})"

    def coincides(self, other, tol=1e-9) -> bool:
        # 同一位置可能有两个顶点（site 事件的分裂点与圆事件的圆心重合），所以不重载 __eq__
        return math.isclose(self.x, other.x, abs_tol=tol) and math.isclose(self.y, other.y, abs_tol=tol)

    def as_tuple(self):
        return (self.x, self.y)
