"""
Constants declarations for indiangrid
"""

# Everest 1830 Ellipsoid Constants
EVEREST_A = 6377276.345  # Major axis (meters)
EVEREST_INV_F = 300.8017  # Inverse flattening

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_INV_F = 298.257223563  # Inverse flattening

# Lambert Conformal Conic grid constants
K0 = 0.998786408  # Scale factor at origin
FALSE_EASTING = 2743195.61
FALSE_NORTHING = 914398.54

# Inverse latitude solver
MAX_ITERATIONS = 3
CONVERGENCE_TOLERANCE = 1e-12  # radians

# Mean Earth Radius (approximate for Haversine)
EARTH_RADIUS_METERS = 6_371_000.0
