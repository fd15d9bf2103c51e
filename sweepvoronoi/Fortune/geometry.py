import math

EPS = 1e-9


def orientation(p, q, r):
    """
    计算向量 (q - p) 与 (r - p) 的叉积：

          | p.x p.y 1 |
          | q.x q.y 1 | = (q.x - p.x)*(r.y - p.y) - (q.y - p.y)*(r.x - p.x)
          | r.x r.y 1 |

    > 0 逆时针，= 0 共线，< 0 顺时针。site 坐标为整数，结果精确。
    """
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def circumcenter(a, b, c):
    """
    计算三角形 ABC 的外接圆圆心 (cx, cy)。

    两条弦 AB、BC 的中垂线交点，写成行列式形式，弦为竖直或水平时也有定义。
    三点共线时中垂线平行，抛出 ValueError。
    """
    ax, ay = a.x, a.y
    bx, by = b.x, b.y
    cx, cy = c.x, c.y

    d = 2 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if d == 0:
        raise ValueError("Points are colinear; circumcenter is undefined.")

    ax2_ay2 = ax ** 2 + ay ** 2
    bx2_by2 = bx ** 2 + by ** 2
    cx2_cy2 = cx ** 2 + cy ** 2

    ux = (ax2_ay2 * (by - cy) +
          bx2_by2 * (cy - ay) +
          cx2_cy2 * (ay - by)) / d

    uy = (ax2_ay2 * (cx - bx) +
          bx2_by2 * (ax - cx) +
          cx2_cy2 * (bx - ax)) / d

    return ux, uy


def circumcircle(left, middle, right):
    """
    Circle through three sites taken in beach-line order.

    Returns ``(cx, cy, radius)``, or None when the triple cannot converge to a
    vertex below the sweep line: clockwise order, or collinear sites
    (parallel bisectors). Rejection is the usual outcome, not an error.
    """
    if orientation(left, middle, right) <= 0:
        return None
    cx, cy = circumcenter(left, middle, right)
    radius = math.hypot(middle.x - cx, middle.y - cy)
    return cx, cy, radius


def parabola_y(site, x, sweep_y):
    """y of the arc of ``site`` at ``x`` when the sweep line is at ``sweep_y``."""
    d = 2.0 * (site.y - sweep_y)
    if d == 0:
        raise ValueError(f"arc of {site} is degenerate on the sweep line y={sweep_y}")
    return ((x - site.x) ** 2 + site.y ** 2 - sweep_y ** 2) / d


def breakpoint_x(left, right, sweep_y):
    """
    x of the breakpoint with the arc of ``left`` on its left side and the arc
    of ``right`` on its right side.
    """
    if left.y == right.y:
        return (left.x + right.x) / 2.0
    if left.y == sweep_y:
        return float(left.x)
    if right.y == sweep_y:
        return float(right.x)

    dl = 2.0 * (left.y - sweep_y)
    dr = 2.0 * (right.y - sweep_y)

    a = 1.0 / dl - 1.0 / dr
    b = -2.0 * (left.x / dl - right.x / dr)
    c = ((left.x ** 2 + left.y ** 2 - sweep_y ** 2) / dl -
         (right.x ** 2 + right.y ** 2 - sweep_y ** 2) / dr)

    disc = math.sqrt(max(b * b - 4.0 * a * c, 0.0))
    q = -0.5 * (b + disc) if b >= 0 else -0.5 * (b - disc)
    x1 = q / a
    x2 = c / q if q != 0 else x1
    lo, hi = min(x1, x2), max(x1, x2)

    # 靠近扫描线的抛物线更窄，两交点之间它在上面
    if left.y > right.y:
        return hi
    return lo
