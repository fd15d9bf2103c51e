from sweepvoronoi.DCEL.vertex import Vertex
from sweepvoronoi.DCEL.halfedge import HalfEdge
from sweepvoronoi.DCEL.face import Face
from sweepvoronoi.DCEL.dcel import DCEL

__all__ = ["Vertex", "HalfEdge", "Face", "DCEL"]
