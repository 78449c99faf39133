"""Distance metrics between geographic coordinates.

Every metric takes ``(lat1, lon1, lat2, lon2)`` and accepts either floats or
numpy arrays, so the same function serves single comparisons and
vectorised scans over many locations.
"""

import numpy as np

# Mean earth radius: 6,371,008.8 m
EARTH_RADIUS_FT = 20_902_231.0


def haversine_ft(lat1, lon1, lat2, lon2):
    """Great-circle distance in feet."""
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    dphi = phi2 - phi1
    dlam = np.radians(lon2) - np.radians(lon1)
    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlam / 2) ** 2
    # Rounding can push a slightly past 1 for antipodal points
    a = np.clip(a, 0.0, 1.0)
    return 2 * EARTH_RADIUS_FT * np.arcsin(np.sqrt(a))


def planar(lat1, lon1, lat2, lon2):
    """Euclidean distance treating (lat, lon) as plane coordinates."""
    return np.hypot(np.subtract(lat2, lat1), np.subtract(lon2, lon1))


METRICS = {
    "haversine": haversine_ft,
    "planar": planar,
}


def get_metric(name: str):
    """Look up a distance metric by name."""
    try:
        return METRICS[name]
    except KeyError:
        raise ValueError(
            f"Unknown distance metric '{name}'. Choose one of: {', '.join(sorted(METRICS))}"
        ) from None
