import math

GAMMA_AIR = 1.4
R_AIR = 287.05

# Hall's rational fit of the inverse Prandtl-Meyer function, gamma = 1.4.
# Source: Hall, AIAA J. 13(8), 1975.
PRANDTL_MEYER_PARAMETER_1 = 1.3604
PRANDTL_MEYER_PARAMETER_2 = 0.0962
PRANDTL_MEYER_PARAMETER_3 = -0.5127
PRANDTL_MEYER_PARAMETER_4 = -0.6722
PRANDTL_MEYER_PARAMETER_5 = -0.3278

# Upper bound of nu(M) as M -> inf, gamma = 1.4.
MAX_PRANDTL_MEYER_VALUE = math.pi / 2.0 * (math.sqrt(6.0) - 1.0)

DEG = math.pi / 180.0
