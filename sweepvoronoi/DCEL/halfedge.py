from typing import Optional

from sweepvoronoi.DCEL.vertex import Vertex


class HalfEdge:
    def __init__(self, origin: Optional[Vertex] = None):
        self.origin = origin          # 起始顶点；无界端为 None
        self.twin = None              # 对边
        self.incident_face = None     # 所属面

        # 由扫描线追踪的一端：True 表示 origin 还要等圆事件来闭合
        self.awaiting_origin = False

    def is_closed(self) -> bool:
        return self.origin is not None and self.twin is not None and self.twin.origin is not None

    def __repr__(self):
        return f"HalfEdge({self.origin})"
