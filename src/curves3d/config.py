"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants of the
demonstration run.

Exports:
    CURVE_COUNT (int): Number of curves generated by the driver.
    PARAMETER_MIN, PARAMETER_MAX (float): Range of random shape parameters.
    DEFAULT_RADIUS (float): Replacement for non-positive radii.
    EVALUATION_PARAMETER (float): Parameter t at which curves are printed.
"""
import logging
import math


# ---------------------------------------------------------------
# GENERATION
# ---------------------------------------------------------------

CURVE_COUNT: int = 10
PARAMETER_MIN: float = 1.0
PARAMETER_MAX: float = 10.0


# ---------------------------------------------------------------
# CURVE CONSTRUCTION
# ---------------------------------------------------------------

DEFAULT_RADIUS: float = 1.0


# ---------------------------------------------------------------
# REPORT
# ---------------------------------------------------------------

EVALUATION_PARAMETER: float = math.pi / 4
EVALUATION_LABEL: str = "PI/4"  # Printed in the report header
NUMBER_FORMAT: str = "g"

LOG_LEVEL: int = logging.WARNING
