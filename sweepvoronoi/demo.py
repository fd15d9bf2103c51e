import logging

from sweepvoronoi.Fortune.observer import LoggingObserver, RecordingObserver
from sweepvoronoi.Fortune.site import Rectangle
from sweepvoronoi.Fortune.voronoi import Voronoi
from sweepvoronoi.GlobalTestVoronoi import GlobalTestVoronoi
from sweepvoronoi.PointDistribution import generate_clustered_sites


def main(n=40, k=4, trace=False):
    logging.basicConfig(level=logging.DEBUG if trace else logging.INFO)

    bounds = Rectangle(0, 0, 1000, 1000)
    points = generate_clustered_sites(n, k, std_dev=120.0, seed=7)

    recorder = RecordingObserver()
    voronoi = Voronoi.from_points(points, bounds, observer=LoggingObserver() if trace else recorder)
    dcel = voronoi.generate()
    print(dcel)

    if not trace:
        fired = [event for event, _, _ in recorder.circle_events]
        print("circle events:", len(fired), "valid:", GlobalTestVoronoi(dcel, voronoi.sites, fired))

    dcel.draw(bounds)


if __name__ == "__main__":
    main()
