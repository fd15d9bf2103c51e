import time

import pandas as pd

from sweepvoronoi.Fortune.site import Rectangle
from sweepvoronoi.Fortune.voronoi import Voronoi
from sweepvoronoi.PointDistribution import generate_uniform_sites


def benchmark_voronoi(ns, scale=10000, seed=42, csv_filename="benchmark_results.csv"):
    results = []
    bounds = Rectangle(0, 0, scale, scale)

    for n in ns:
        points = generate_uniform_sites(n, (0, scale), (0, scale), seed=seed, distinct_axes=False)
        voronoi = Voronoi.from_points(points, bounds)

        start = time.perf_counter()
        dcel = voronoi.generate()
        end = time.perf_counter()

        elapsed = end - start
        print(f"n={n}: {elapsed:.6f} seconds")
        results.append({
            "n": n,
            "time_s": elapsed,
            "vertices": len(dcel.vertices),
            "edges": dcel.edge_count(),
        })

    df = pd.DataFrame(results)
    if csv_filename:
        df.to_csv(csv_filename, index=False)
        print(f"Benchmark results saved to {csv_filename}")
    return df


if __name__ == "__main__":
    ns = [10, 50, 100, 250, 500, 1000, 2000, 5000]
    benchmark_voronoi(ns)
