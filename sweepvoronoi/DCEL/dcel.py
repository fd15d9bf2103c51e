import numpy as np
import matplotlib.pyplot as plt

from sweepvoronoi.DCEL.vertex import Vertex
from sweepvoronoi.DCEL.halfedge import HalfEdge
from sweepvoronoi.DCEL.face import Face


class DCEL:
    """
    Voronoi 图的半边结构。

    扫描线只需要四个操作：建面 (add_face)、建顶点 (add_vertex)、
    建一对 twin 半边 (new_edge)、以及在圆事件时闭合半边 (close_twins)。
    无界边不做裁剪，未闭合的一端 origin 保持 None。
    """

    def __init__(self):
        self.vertices = []    # 所有顶点
        self.half_edges = []  # 所有半边
        self.faces = []       # 所有面，每个 site 一个

    def add_vertex(self, x: float, y: float) -> Vertex:
        v = Vertex(x, y)
        self.vertices.append(v)
        return v

    def add_half_edge(self, origin: Vertex = None) -> HalfEdge:
        he = HalfEdge(origin)
        self.half_edges.append(he)
        if origin is not None and origin.incident_edge is None:
            origin.incident_edge = he
        return he

    def add_face(self, site) -> Face:
        face = Face(site.id, site)
        self.faces.append(face)
        return face

    def new_edge(self, face1: Face, face2: Face, vertex: Vertex = None):
        """
        为 face1 与 face2 之间的新边界创建一对 twin 半边。

        he1 属于 face1，起点为 vertex（可以为 None，表示无界）；
        he2 属于 face2，起点待定，之后由 close_twins 赋值。
        """
        he1 = self.add_half_edge(vertex)
        he2 = self.add_half_edge()

        he1.twin = he2
        he2.twin = he1
        he2.awaiting_origin = True

        for he, face in ((he1, face1), (he2, face2)):
            he.incident_face = face
            face.boundary.append(he)
            if face.outer_component is None:
                face.outer_component = he
        return he1, he2

    def close_twins(self, edges, vertex: Vertex):
        """
        把 vertex 赋给 edges 中每一对还在等待的那一端。
        已经闭合的对不受影响，所以从两侧的弧各调用一次也只会闭合一次。
        """
        for he in edges:
            if he.awaiting_origin:
                target = he
            elif he.twin is not None and he.twin.awaiting_origin:
                target = he.twin
            else:
                continue
            target.origin = vertex
            target.awaiting_origin = False
            if vertex.incident_edge is None:
                vertex.incident_edge = target

    def edge_count(self) -> int:
        """twin 对的数量"""
        return len(self.half_edges) // 2

    def open_ends(self):
        return [he for he in self.half_edges if he.origin is None]

    def euler_characteristic(self) -> int:
        """
        V - E + F，无界端统一连到一个无穷远点（存在时计入 V）。
        """
        v = len(self.vertices) + (1 if self.open_ends() else 0)
        return v - self.edge_count() + len(self.faces)

    def face_edge_counts(self):
        return sorted(len(face.boundary) for face in self.faces)

    def vertex_coordinates(self) -> np.ndarray:
        if not self.vertices:
            return np.empty((0, 2), dtype=float)
        return np.array([v.as_tuple() for v in self.vertices], dtype=float)

    def draw(self, bounds=None, show=True):
        """
        利用 matplotlib 绘制所有 site 与已闭合的边；无界边不绘制。
        """
        plt.figure()
        ax = plt.gca()

        for face in self.faces:
            site = face.data
            ax.plot(site.x, site.y, 'ro')
            ax.text(site.x + 0.02, site.y + 0.02, f"{face.id}", color="blue", fontsize=10)

        for idx, he in enumerate(self.half_edges):
            # 每对只画一次
            if idx % 2 or not he.is_closed():
                continue
            ax.plot([he.origin.x, he.twin.origin.x], [he.origin.y, he.twin.origin.y], 'b-', lw=1)

        if bounds is not None:
            xs = [bounds.min_x, bounds.max_x, bounds.max_x, bounds.min_x, bounds.min_x]
            ys = [bounds.min_y, bounds.min_y, bounds.max_y, bounds.max_y, bounds.min_y]
            ax.plot(xs, ys, 'k--', lw=1)
            ax.set_xlim(bounds.min_x, bounds.max_x)
            ax.set_ylim(bounds.min_y, bounds.max_y)

        ax.set_aspect('equal')
        ax.set_title("Voronoi DCEL: sites and closed edges")
        if show:
            plt.show()

    def __repr__(self):
        return (f"DCEL(\n  Vertices: {len(self.vertices)}\n  "
                f"HalfEdges: {len(self.half_edges)}\n  Faces: {self.faces}\n)")
