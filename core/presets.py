
import math

MAX_HISTORY = 30
MAX_INPUT_LENGTH = 16
DISPLAY_LENGTH_LIMIT = 14
DEFAULT_THEME = "dark"
THEMES = ("dark", "light")

# Values below this magnitude (and above zero) are shown in exponential form,
# as are values at or above LARGE_THRESHOLD.
SMALL_THRESHOLD = 1e-10
LARGE_THRESHOLD = 1e12

SYSTEM_TOLERANCE = 1e-10

CONSTANTS = {
    "pi": math.pi,
    "e": math.e,
    "phi": (1 + math.sqrt(5)) / 2,
    "sqrt2": math.sqrt(2),
    "sqrt3": math.sqrt(3),
    "ln2": math.log(2),
    "ln10": math.log(10),
    "c": 299792458.0,  # speed of light, m/s
    "g": 9.80665,  # standard gravity, m/s²
}

# Linear factors against the base unit of each category (m, kg, m²).
LENGTH_FACTORS = {"m": 1, "km": 1000, "cm": 0.01, "mm": 0.001, "mi": 1609.344,
"yd": 0.9144, "ft": 0.3048, "in": 0.0254}
MASS_FACTORS = {"kg": 1, "g": 0.001, "mg": 0.000001, "lb": 0.453592, "oz": 0.0283495, "t": 1000}
AREA_FACTORS = {"m2": 1, "km2": 1000000, "cm2": 0.0001, "ha": 10000, "ac": 4046.86,
"ft2": 0.092903, "mi2": 2590000}
UNIT_TABLES = {"length": LENGTH_FACTORS, "mass": MASS_FACTORS, "area": AREA_FACTORS}
TEMPERATURE_UNITS = ("c", "f", "k")

RADICES = (2, 8, 10, 16)
