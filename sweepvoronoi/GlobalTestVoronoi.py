import logging
import math

from sweepvoronoi.DCEL.dcel import DCEL

logger = logging.getLogger(__name__)


def GlobalTestVoronoi(dcel: DCEL, sites, circle_events=(), tol=1e-6):
    """
    对一次完整扫描的结果做全局检查：
      1. 每个 site 一个面，且面与 site 互相引用；
      2. 每对 twin 互为对边，且各自只属于一个面；
      3. 欧拉公式 V - E + F = 2（无界端连到无穷远点，至少两个 site 时成立）；
      4. 每个圆事件的圆心到三个 site 的距离都等于半径。
    有一项不满足就记录下来并返回 False。
    """
    if len(dcel.faces) != len(sites):
        logger.warning("Faces: %d, sites: %d", len(dcel.faces), len(sites))
        return False
    for site in sites:
        if site.face is None or site.face.data is not site:
            logger.warning("Site %s is not linked to its face", site)
            return False

    for he in dcel.half_edges:
        if he.twin is None or he.twin.twin is not he or he.incident_face is None:
            logger.warning("Half-edge %s is not paired", he)
            return False
        if he.incident_face is he.twin.incident_face:
            logger.warning("Half-edge %s and its twin bound the same face", he)
            return False

    if len(sites) >= 2 and dcel.euler_characteristic() != 2:
        logger.warning("V - E + F = %d", dcel.euler_characteristic())
        return False

    for event in circle_events:
        for site in event.sites:
            d = math.hypot(site.x - event.x, site.y - event.center_y)
            if not math.isclose(d, event.radius, rel_tol=tol, abs_tol=tol):
                logger.warning("Circle %s: distance to %s is %f", event, site, d)
                return False
    return True
