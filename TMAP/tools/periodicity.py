"""
Bijectivity and periodicity of toral maps on finite grids.
"""

import numpy as np
from TMAP.dynamics.toral_map import toral_dest

def is_bijective(W, H, A):
    """ True if one pass of A permutes the W x H grid (no overwritten or empty pixels). """
    dest = toral_dest(W, H, A)
    return np.unique(dest).size == dest.size

def toral_period(W, H, A):
    """
    Computes the number of iterations after which A returns every pixel of a
    W x H grid to its starting place. This is the lcm of the cycle lengths of
    the pixel permutation.
    Returns None if A is not a bijection on the grid.
    """
    dest = toral_dest(W, H, A)
    if np.unique(dest).size != dest.size:
        return None

    dest = dest.tolist()
    seen = [False] * len(dest)
    period = 1
    for start in range(len(dest)):
        if seen[start]:
            continue
        length = 0
        i = start
        while not seen[i]:
            seen[i] = True
            i = dest[i]
            length += 1
        period = int(np.lcm(period, length))
    return period
