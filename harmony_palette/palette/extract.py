import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from ..color import create_color

# Clusters below this saturation are too grey to anchor a hue
MIN_SEED_SATURATION = 0.15


def extract_colors(image_path, n_colors=8):
    """Extract dominant colors using k-means clustering

    Args:
        image_path: Path to the source image
        n_colors: Number of clusters

    Returns:
        list: (Color, pixel_count) pairs, most common first
    """
    img = Image.open(image_path).convert("RGB")
    img.thumbnail((300, 300))
    pixels = np.array(img).reshape(-1, 3)

    # Remove extreme pixels
    mask = (pixels.sum(axis=1) > 30) & (pixels.sum(axis=1) < 735)
    filtered_pixels = pixels[mask]

    if len(filtered_pixels) < n_colors:
        filtered_pixels = pixels

    n_clusters = min(n_colors, len(np.unique(filtered_pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(filtered_pixels)
    counts = np.bincount(kmeans.labels_, minlength=n_clusters)

    colors = []
    for center, count in zip(kmeans.cluster_centers_, counts):
        r, g, b = int(round(center[0])), int(round(center[1])), int(round(center[2]))
        colors.append((create_color(r, g, b), int(count)))

    colors.sort(key=lambda item: item[1], reverse=True)
    return colors


def dominant_hue(image_path, n_colors=8):
    """Hue (degrees) of the most common sufficiently saturated color in an image."""
    colors = extract_colors(image_path, n_colors=n_colors)
    for color, _ in colors:
        if color.hsv[1] >= MIN_SEED_SATURATION:
            return color.hsv[0]
    return colors[0][0].hsv[0]
