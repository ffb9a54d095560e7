from .constants import (T_TRIPLE, T_MIN, T_MAX, T_HW_LOW, T_HW_HIGH, R_W, TWS_MAX_ITER, TWS_TOL, TWS_BRACKET,
                        G, M, GG, L, MH, HI, HV, VI, DW_NUM, DW_DEN, BV, CV)
