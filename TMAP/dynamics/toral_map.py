"""
Discrete toral maps acting on pixel grids.

A grid is a numpy array indexed data[y,x], of shape (H,W) or (H,W,channels).
The matrix A = [[a,b],[c,d]] sends pixel (x,y) to
    x' = (a*x*H + b*y*W) / H  mod W
    y' = (c*x*H + d*y*W) / W  mod H
which is the unit torus map (a*q + b*p, c*q + d*p) mod 1 rescaled to a W x H grid.
Division truncates toward zero and happens before the modulo.
"""

from collections import namedtuple
import numpy as np

# Destination pixels that no source pixel lands on keep this value
BLACK = 0

INT64_MAX = np.iinfo(np.int64).max


class MalformedMatrix(ValueError):
    """Matrix text is not four comma-separated integers."""


class Matrix(namedtuple('Matrix', ['a', 'b', 'c', 'd'])):
    """ Integer toral map matrix A = [[a,b],[c,d]]. """
    __slots__ = ()

    def det(self):
        return self.a * self.d - self.b * self.c

    def __str__(self):
        return ','.join(map(str, self))


# Arnold's cat map
CAT_MATRIX = Matrix(2, 1, 1, 1)


def parse_matrix(text):
    """ Parses 'a,b,c,d' into a Matrix. Raises MalformedMatrix on bad input. """
    fields = text.split(',')
    if len(fields) != 4:
        raise MalformedMatrix('Expected 4 matrix elements but received {0}.'.format(len(fields)))
    try:
        return Matrix(*[int(f.strip()) for f in fields])
    except ValueError:
        raise MalformedMatrix('Matrix elements must be integers, got {0!r}.'.format(text)) from None


def wrap(v, n):
    """ Euclidean modulo, always in [0, n) for n > 0 regardless of the sign of v. """
    return (v % n + n) % n


def trunc_div(num, den):
    """ Integer division rounding toward zero, for den > 0. """
    return np.sign(num) * (np.abs(num) // den)


def check_overflow(W, H, A):
    """
    Raises OverflowError if any intermediate product of the map over a W x H grid
    could leave the int64 range. Bounds are computed with Python integers.
    """
    xmax, ymax = W - 1, H - 1
    bound = max(abs(A.a)*xmax*H + abs(A.b)*ymax*W,
                abs(A.c)*xmax*H + abs(A.d)*ymax*W)
    if bound > INT64_MAX:
        raise OverflowError('Matrix {0} overflows 64-bit arithmetic on a {1}x{2} grid.'.format(A, W, H))


def toral_coords(x, y, W, H, A):
    """
    Destination coordinates of the source pixel(s) (x,y) on a W x H grid.
    x and y may be integers or integer arrays of matching shape.
    """
    if W <= 0 or H <= 0:
        raise ValueError('Grid dimensions must be positive, got {0}x{1}.'.format(W, H))
    check_overflow(W, H, A)

    x = np.asarray(x, dtype=np.int64)
    y = np.asarray(y, dtype=np.int64)
    xout = wrap(trunc_div(A.a*x*H + A.b*y*W, H), W)
    yout = wrap(trunc_div(A.c*x*H + A.d*y*W, W), H)
    return xout, yout


def toral_dest(W, H, A):
    """ Flat destination index of every flat (row-major) source index. """
    x, y = np.meshgrid(np.arange(W), np.arange(H), indexing='xy')
    xout, yout = toral_coords(x, y, W, H, A)
    return (yout * W + xout).ravel()


def check_grid(data, A, iters):
    """ Rejects inputs before any pass is computed. """
    if iters < 0:
        raise ValueError('Number of iterations must be non-negative, got {0}.'.format(iters))
    if data.ndim < 2:
        raise ValueError('Expected a 2D grid but data has shape {0}.'.format(data.shape))
    H, W = data.shape[:2]
    if W == 0 or H == 0:
        raise ValueError('Grid dimensions must be positive, got {0}x{1}.'.format(W, H))
    check_overflow(W, H, A)


def toral_pass(data, A, fill=BLACK):
    """
    Performs one iteration of the toral map A on data and returns a new grid.
    data itself is left untouched.

    If A is not a bijection on the grid, several sources share a destination.
    The last one in row-major source order wins, and destinations that nothing
    lands on keep 'fill'.
    """
    H, W = data.shape[:2]
    pixel_shape = data.shape[2:]
    dest = toral_dest(W, H, A)

    # np.unique returns first occurrences, so search the reversed sweep
    _, first_rev = np.unique(dest[::-1], return_index=True)
    last = dest.size - 1 - first_rev

    out = np.full(data.shape, fill, dtype=data.dtype)
    out_flat = out.reshape((H*W,) + pixel_shape)
    out_flat[dest[last]] = data.reshape((H*W,) + pixel_shape)[last]
    return out


def toral_iterates(data, A, iters, fill=BLACK):
    """ Yields the grid after each of the iterations 1, ..., iters. """
    check_grid(data, A, iters)
    for _ in range(iters):
        data = toral_pass(data, A, fill)
        yield data


def apply_toral_map(data, A, iters, fill=BLACK):
    """
    Applies the toral map A to data 'iters' times, feeding each pass into the next.
    Zero iterations returns data as is.
    """
    check_grid(data, A, iters)
    for _ in range(iters):
        data = toral_pass(data, A, fill)
    return data
