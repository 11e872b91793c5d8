import numpy as np
from ._numeric import as_vector


class Surface:
    """
    Finite planar patch (wall, floor or ceiling segment).

    p0 : (3,) array
        World-space coordinates of the patch origin (corner 0,0).
    pU : (3,) array
        Corner at (1,0).  u-axis = pU - p0
    pV : (3,) array
        Corner at (0,1).  v-axis = pV - p0

    The normal is u x v; room surfaces are built so that it points into the
    room.
    """

    def __init__(self, p0, pU, pV, surface_id=None, name=None, eps=1e-9):
        self.surface_id = "Surface" if surface_id is None else surface_id
        self.name = str(self.surface_id) if name is None else str(name)
        self.eps = eps

        self.p0 = as_vector(p0)
        self.pU = as_vector(pU)
        self.pV = as_vector(pV)

        self.u = self.pU - self.p0
        self.v = self.pV - self.p0

        n = np.cross(self.u, self.v)
        norm = np.linalg.norm(n)
        if not np.isfinite(norm) or norm < self.eps:
            raise ValueError(f"Surface {self.name} is degenerate (zero area)")
        self.normal = n / norm

        # maps a 3-vec in the plane -> (a, b) patch coordinates
        A = np.column_stack([self.u, self.v])  # (3,2)
        self.inv = np.linalg.pinv(A.T @ A) @ A.T

    def __repr__(self):
        return (
            f"Surface(id={self.surface_id!r}, p0={self.p0.tolist()}, "
            f"pU={self.pU.tolist()}, pV={self.pV.tolist()})"
        )

    @property
    def corners(self) -> np.ndarray:
        """(4, 3) array of the patch corners in drawing order."""
        return np.array([self.p0, self.pU, self.pU + self.v, self.pV])

    @property
    def area(self) -> float:
        return float(np.linalg.norm(np.cross(self.u, self.v)))

    def normal_at(self, point=None) -> np.ndarray:
        """Surface normal; constant across a planar patch."""
        return self.normal.copy()

    def intersect(self, origin, direction) -> float | None:
        """
        Ray parameter t of the hit point origin + t * direction, or None.

        Only strictly positive t inside the patch count as hits. Rays
        parallel to the plane never hit.
        """
        origin = np.asarray(origin, dtype=float)
        direction = np.asarray(direction, dtype=float)

        denom = direction @ self.normal
        if abs(denom) < self.eps:
            return None
        t = ((self.p0 - origin) @ self.normal) / denom
        if not np.isfinite(t) or t <= self.eps:
            return None

        hit = origin + t * direction
        a, b = self.inv @ (hit - self.p0)
        lo, hi = -self.eps, 1 + self.eps
        if lo <= a <= hi and lo <= b <= hi:
            return float(t)
        return None
