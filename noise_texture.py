"""
noise_texture.py

Turn the scalar field of PerlinNoise3D into something you can look at:
 - a diagonal blue -> red gradient fill (the plain canvas backdrop)
 - a z-slice of the noise sampled on a pixel grid
 - a grayscale image of such a slice
Everything stays in memory; nothing is saved.
"""
import numpy as np
from PIL import Image

from perlin_noise_3d import PerlinNoise3D, lerp

BLUE = (0, 0, 255)
RED = (255, 0, 0)


def _check_size(width, height):
    if width <= 0 or height <= 0:
        raise ValueError(f"width and height must be positive, got {width}x{height}")


def create_gradient(width, height, start_color=BLUE, end_color=RED):
    """
    RGB image filled with a linear gradient running from the top-left
    corner (0, 0) to the bottom-right corner (width, height).
    Each pixel centre is projected on that diagonal; the projection,
    clamped to [0, 1], blends start_color into end_color.
    """
    _check_size(width, height)

    xv, yv = np.meshgrid(np.arange(width, dtype=np.float64) + 0.5,
                         np.arange(height, dtype=np.float64) + 0.5)
    t = (xv * width + yv * height) / float(width * width + height * height)
    t = np.clip(t, 0.0, 1.0)

    start = np.asarray(start_color, dtype=np.float64)
    end = np.asarray(end_color, dtype=np.float64)
    rgb = lerp(t[..., None], start, end)
    rgb = np.rint(rgb).astype(np.uint8)
    return Image.fromarray(rgb)


def sample_slice(generator, width, height, z=0.0, spacing=32.0):
    """
    Sample generator.noise on a (height, width) pixel grid at depth z.
    spacing: pixels per noise lattice cell.
    """
    _check_size(width, height)
    if spacing <= 0:
        raise ValueError(f"spacing must be positive, got {spacing}")

    values = np.zeros((height, width), dtype=np.float64)
    for row in range(height):
        for col in range(width):
            values[row, col] = generator.noise(col / spacing, row / spacing, z)
    return values


def slice_to_image(values):
    """
    Grayscale image of a float array in [-1, 1]. Out of range values are
    clipped; pure black is avoided by mapping to [1, 255].
    """
    values = np.asarray(values, dtype=np.float64)
    if values.ndim != 2:
        raise ValueError(f"expected a 2D array, got shape {values.shape}")

    clamped = np.clip(values, -1.0, 1.0)
    img = ((clamped + 1.0) * 0.5 * 255.0).astype(np.uint8)
    img[img == 0] = 1
    return Image.fromarray(img)


if __name__ == "__main__":
    import matplotlib.pyplot as plt

    W, H = 256, 256
    SPACING = 32
    SEED = 42
    Z = 0.5

    perlin = PerlinNoise3D(seed=SEED)
    backdrop = create_gradient(W, H)
    values = sample_slice(perlin, W, H, z=Z, spacing=SPACING)
    print(f"Sampled {W}x{H} slice at z={Z}: min={values.min():.4f} max={values.max():.4f}")

    fig, (ax_left, ax_right) = plt.subplots(1, 2, figsize=(10, 5))
    ax_left.imshow(backdrop)
    ax_left.set_title("Gradient backdrop")
    ax_right.imshow(slice_to_image(values), cmap="gray", vmin=0, vmax=255)
    ax_right.set_title(f"3D Perlin noise, z = {Z}")
    for ax in (ax_left, ax_right):
        ax.set_axis_off()

    plt.tight_layout()
    plt.show()
