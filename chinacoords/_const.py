"""
Constants declarations for chinacoords
"""
import math

PI = math.pi

# Krasovsky 1940 ellipsoid, the reference for the GCJ02 offset
KRASOVSKY_A = 6378245.0  # Major axis (meters)
KRASOVSKY_EE = 0.006693421622965943  # Eccentricity squared

# Angular scale used by the BD09 distortion
X_PI = PI * 3000.0 / 180.0

# Constant additive shift applied on top of GCJ02 by BD09
BD09_LNG_OFFSET = 0.0065
BD09_LAT_OFFSET = 0.006

# Mean Earth Radius (not used by any of the offset formulas)
EARTH_RADIUS_METERS = 6378137

# Approximate region the offset polynomials were fitted over
# (min lng, min lat, max lng, max lat)
CHINA_BOUNDS = (73.0, 3.0, 135.0, 53.0)
