"""
Kernel Configuration
====================

Physical constants and tunable parameters for the SatSim kernel.
"""

from dataclasses import dataclass


# Earth gravity and rotation
MU_EARTH = 3.986004418e14  # m³/s²
OMEGA_EARTH = 7.292115146706979e-5  # rad/s

# WGS84 ellipsoid
WGS84_A = 6378137.0  # m, equatorial radius
WGS84_F = 1.0 / 298.257223563
WGS84_B = WGS84_A * (1.0 - WGS84_F)
WGS84_E2 = WGS84_F * (2.0 - WGS84_F)

# Sun
SUN_RADIUS = 695700000.0  # m, mean solar radius
AU_M = 149597870700.0  # m

# Time systems
SECONDS_PER_DAY = 86400.0
TAI_UTC_OFFSET = 37.0  # seconds (as of 2017, update as needed)
TT_TAI_OFFSET = 32.184  # seconds
J2000_JD = 2451545.0

# Span of the IAU precession-nutation table (daily samples, TT)
XYS_SAMPLE_ZERO_JD_TT = 2442396.5
XYS_TOTAL_SAMPLES = 27426

# Propagation
VALLADO_MAX_ITERATIONS = 350
LAGRANGE_NUM_POINTS = 7
LAGRANGE_SAMPLES_PER_PERIOD = 60.0
DEFAULT_LAGRANGE_INTERVAL = 100.0  # seconds

# Gimbal
DEFAULT_GIMBAL_RANGE = 45000000.0  # m


@dataclass
class KernelConfig:
    """Earth orientation options used by the Earth frame provider."""
    # Use IAU 2000B precession-nutation inside the table span
    use_iau_precession_nutation: bool = True

    # Earth orientation parameters
    dut1_seconds: float = 0.0  # UT1 - UTC
    polar_motion_x_arcsec: float = 0.0
    polar_motion_y_arcsec: float = 0.0

    def __post_init__(self):
        """Validate configuration."""
        if abs(self.dut1_seconds) > 0.9:
            raise ValueError("UT1-UTC must stay within ±0.9 s")

    def has_precession_nutation(self, jd_tt: float) -> bool:
        """Check whether precession-nutation data covers a TT Julian date."""
        if not self.use_iau_precession_nutation:
            return False
        start = XYS_SAMPLE_ZERO_JD_TT
        stop = XYS_SAMPLE_ZERO_JD_TT + (XYS_TOTAL_SAMPLES - 1)
        return start <= jd_tt <= stop


def default_config() -> KernelConfig:
    """Create the default kernel configuration."""
    return KernelConfig()
