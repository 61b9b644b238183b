"""
perlin_noise_3d.py

Classic 3D gradient (Perlin) noise. A generator owns one shuffled
permutation table, built once at construction, and maps any point
(x, y, z) to a scalar in roughly [-1, 1].

The table never changes after construction, so `noise` can be called
from several threads at once. To get a different field, build a new
generator.
"""
import math
from random import Random


def fade(t):
    # 6t^5 - 15t^4 + 10t^3, zero first and second derivative at 0 and 1
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(t, a, b):
    return a + t * (b - a)


def grad(hash_value, x, y, z):
    """
    Dot product of (x, y, z) with one of the 12 cube-edge gradients.
    The low 4 bits of the hash pick the direction; 12..15 repeat four
    of the first twelve.
    """
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if (h & 1) == 0 else -u) + (v if (h & 2) == 0 else -v)


class PerlinNoise3D:
    TABLE_SIZE = 256

    def __init__(self, seed=None, rng=None):
        """
        seed: integer for a reproducible table, None for an OS-seeded one.
        rng: optional random source with a `randrange(n)` method. When
        given it is used instead of `Random(seed)`.
        """
        self.seed = seed
        if rng is None:
            rng = Random(seed)

        p = list(range(self.TABLE_SIZE))
        # Fisher-Yates, same draws as Random.shuffle
        for i in range(self.TABLE_SIZE - 1, 0, -1):
            j = rng.randrange(i + 1)
            p[i], p[j] = p[j], p[i]
        # stored twice so lookups up to index 511 need no wrap
        self._perm = tuple(p + p)

    @property
    def permutation(self):
        return self._perm[:self.TABLE_SIZE]

    def noise(self, x, y, z):
        # unit cube that contains the point
        fx = math.floor(x)
        fy = math.floor(y)
        fz = math.floor(z)
        xi = fx & 255
        yi = fy & 255
        zi = fz & 255

        # relative position inside the cube, each in [0, 1)
        x -= fx
        y -= fy
        z -= fz

        u = fade(x)
        v = fade(y)
        w = fade(z)

        p = self._perm

        # hash the 8 corners
        a = p[xi] + yi
        aa = p[a] + zi
        ab = p[a + 1] + zi
        b = p[xi + 1] + yi
        ba = p[b] + zi
        bb = p[b + 1] + zi

        x1 = lerp(u, grad(p[aa], x, y, z), grad(p[ba], x - 1, y, z))
        x2 = lerp(u, grad(p[ab], x, y - 1, z), grad(p[bb], x - 1, y - 1, z))
        y1 = lerp(v, x1, x2)

        x3 = lerp(u, grad(p[aa + 1], x, y, z - 1), grad(p[ba + 1], x - 1, y, z - 1))
        x4 = lerp(u, grad(p[ab + 1], x, y - 1, z - 1), grad(p[bb + 1], x - 1, y - 1, z - 1))
        y2 = lerp(v, x3, x4)

        # float() so integer input still yields a float
        return float(lerp(w, y1, y2))

    def __repr__(self):
        return f"PerlinNoise3D(seed={self.seed!r})"


if __name__ == "__main__":
    import numpy as np
    import matplotlib.pyplot as plt

    SEED = 42
    Y, Z = 0.5, 0.5
    x_start, x_end = 0.0, 8.0
    n_samples = 400

    perlin = PerlinNoise3D(seed=SEED)
    x = np.linspace(x_start, x_end, n_samples)
    values = np.array([perlin.noise(xx, Y, Z) for xx in x])
    print(f"seed={SEED}: noise(0.5, 0.5, 0.5) = {perlin.noise(0.5, 0.5, 0.5):.6f}")
    print(f"line y={Y}, z={Z}: min={values.min():.4f} max={values.max():.4f}")

    # lattice crossings along the line
    ints = np.arange(np.ceil(x_start), np.floor(x_end) + 1)

    plt.figure(figsize=(10, 4.5))
    plt.plot(x, values, color="orange", linewidth=2, label="3D perlin noise")
    plt.scatter(ints, [perlin.noise(i, Y, Z) for i in ints], color="blue", s=30, zorder=5, label="cell boundaries")
    plt.title(f"3D Perlin noise along x (y = {Y}, z = {Z})")
    plt.xlabel("x")
    plt.ylabel("value")
    plt.ylim(-1.05, 1.05)
    plt.grid(alpha=0.3)
    plt.legend(loc="upper right")
    plt.tight_layout()
    plt.show()
