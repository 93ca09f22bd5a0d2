"""Physical constants and design assumptions used throughout Oilfire.

The sizing pipeline works in imperial engineering units (lbf, lbm, psi,
ft, in, °R, BTU) and converts to SI only at the end, so the constants
below are imperial unless noted.
"""

import math

# Gas dynamics
R_GAS = 65.0  # ft·lbf/(lbm·°R), combustion gas constant
G_C = 32.2  # ft/s², gravitational constant
GAMMA = 1.2  # ratio of specific heats of combustion products

# Isentropic throat ratios for GAMMA = 1.2
THROAT_TEMPERATURE_RATIO = 0.909  # Tt/Tc
THROAT_PRESSURE_RATIO = 0.564  # Pt/Pc

# Propellant / coolant densities
WATER_DENSITY = 62.4  # lbm/ft³
OXYGEN_DENSITY = 2.26  # lbm/ft³, gaseous oxygen at injector inlet

# Chamber and wall
CHAMBER_VOLUME_FACTOR = 1.1  # convergent-section volume allowance
COPPER_ALLOWABLE_STRESS = 16000.0  # psi
WALL_SAFETY_FACTOR = 3.0

# Cooling jacket
HEAT_FLUX = 3.0  # BTU/(in²·s)
COOLANT_TEMPERATURE_RISE = 40.0  # °R

# Injector
INJECTOR_CD = 0.7
INJECTOR_DELTA_P = 100.0  # psi

# Injector face layout [mm]
OXIDIZER_RING_FRACTION = 0.333  # oxidizer hole circle, fraction of face radius
FUEL_RING_FRACTION = 0.666  # fuel hole circle, fraction of face radius
FUEL_MANIFOLD_HEIGHT = 30.0
OXIDIZER_MANIFOLD_HEIGHT = 40.0

# Chamber/injector flange [mm]
FLANGE_GROOVE_WIDTH = 4.75
FLANGE_GROOVE_DEPTH = 2.72
FLANGE_DRILL_SPACE = 15.0
FLANGE_BOLT_DIAMETER = 6.35  # 1/4 in
FLANGE_BOLT_COUNT = 8

# Nozzle cone half-angles
CONVERGENT_HALF_ANGLE = 30.0  # deg
DIVERGENT_HALF_ANGLE = 15.0  # deg

# Mathematical
PI = math.pi
DEG_TO_RAD = math.pi / 180.0

# Length / area / volume
IN_PER_FT = 12.0
IN2_PER_FT2 = 144.0
FT_TO_MM = 304.8
IN_TO_MM = 25.4
FT2_TO_M2 = 0.092903
FT3_TO_M3 = 0.0283168

# Mass, pressure, power
LBM_TO_KG = 0.453592
PSI_TO_PA = 6894.76
BTU_S_TO_W = 1055.06

# Temperature (°R -> K through the Fahrenheit/Celsius offsets)
RANKINE_AT_FREEZING = 491.67
KELVIN_AT_FREEZING = 273.15
