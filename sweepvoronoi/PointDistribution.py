import numpy as np
from scipy.stats import truncnorm


def _unique(points, distinct_axes):
    seen, xs, ys = set(), set(), set()
    out = []
    for x, y in points:
        if (x, y) in seen:
            continue
        if distinct_axes and (x in xs or y in ys):
            continue
        seen.add((x, y))
        xs.add(x)
        ys.add(y)
        out.append((x, y))
    return out


def generate_uniform_sites(n, x_range=(0, 1000), y_range=(0, 1000), seed=None, distinct_axes=True):
    """
    在矩形内均匀生成 n 个整数 site，去掉重复点。

    distinct_axes=True 时任意两点的 x、y 都不相同（一般位置，测试用）。
    返回 list[(int, int)]。
    """
    rng = np.random.default_rng(seed)
    points = []
    while len(points) < n:
        xs = rng.integers(x_range[0], x_range[1] + 1, size=2 * n)
        ys = rng.integers(y_range[0], y_range[1] + 1, size=2 * n)
        points = _unique(points + [(int(x), int(y)) for x, y in zip(xs, ys)], distinct_axes)
    return points[:n]


def generate_clustered_sites(n, k, x_range=(0, 1000), y_range=(0, 1000), std_dev=50.0, seed=None):
    """
    在指定矩形区域内生成 n 个聚类的整数 site，每个簇沿 x、y 做截断正态采样。

    参数
    ----
    n : int
        点数
    k : int
        簇数
    std_dev : float
        每个簇的标准差
    """
    rng = np.random.default_rng(seed)
    centers = np.column_stack([
        rng.uniform(x_range[0], x_range[1], size=k),
        rng.uniform(y_range[0], y_range[1], size=k),
    ])

    points = []
    while len(points) < n:
        labels = rng.integers(0, k, size=n)
        batch = []
        for cid in labels:
            cx, cy = centers[cid]
            # 标准化后的截断区间
            ax, bx = (x_range[0] - cx) / std_dev, (x_range[1] - cx) / std_dev
            ay, by = (y_range[0] - cy) / std_dev, (y_range[1] - cy) / std_dev
            x = truncnorm.rvs(ax, bx, loc=cx, scale=std_dev, random_state=rng)
            y = truncnorm.rvs(ay, by, loc=cy, scale=std_dev, random_state=rng)
            batch.append((int(round(x)), int(round(y))))
        points = _unique(points + batch, distinct_axes=False)
    return points[:n]
