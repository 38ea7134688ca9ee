"""
Performs a toral (cat-like) map on an input image any number of times.
Pixels are permuted on the wrap-around grid; the image is not resized.

Command:
python toral_map_img.py file [-o NAME] [-c COUNT] [-m MATRIX] [-saveall]

file - image file including extension
o (optional; default output.<ext of file>) - output file name
c (optional; default 1) - number of times to iterate the map
m (optional; default 2,1,1,1) - the matrix elements a,b,c,d, i.e. A = [[a,b],[c,d]]
saveall (optional) - Include to also save all intermediate steps.
"""

import argparse
import sys
import warnings

import TMAP.dynamics.toral_map as toral_map
import TMAP.tools.image_io as image_io
from TMAP.tools.periodicity import is_bijective

def iteration_count(text):
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid iteration count: {0!r}'.format(text)) from None
    if count < 0:
        raise argparse.ArgumentTypeError('iteration count must be non-negative, got {0}'.format(count))
    return count

def matrix_elements(text):
    try:
        return toral_map.parse_matrix(text)
    except toral_map.MalformedMatrix as e:
        raise argparse.ArgumentTypeError(str(e)) from None

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Iterates a toral map on the pixels of an image.")
    parser.add_argument("file",
                        help="image file including extension")
    parser.add_argument("-o", dest="output", metavar="NAME",
                        help="output file name (default output.<ext of file>)")
    parser.add_argument("-c", dest="iters", metavar="COUNT", type=iteration_count, default=1,
                        help="iterations of the map (default 1)")
    parser.add_argument("-m", dest="matrix", metavar="MATRIX", type=matrix_elements,
                        default=toral_map.CAT_MATRIX,
                        help="matrix elements a,b,c,d (default 2,1,1,1)")
    parser.add_argument("-saveall", action="store_true",
                        help="save all intermediate steps")
    args = parser.parse_args(argv)

    if args.output is None:
        args.output = image_io.default_output(args.file)
    if not image_io.is_writable_format(args.output):
        parser.error("unknown image format for output file '{0}'".format(args.output))
    return args

def main(file, output, iters, matrix, saveall=False):
    print('Input  : {}'.format(file))
    print('Output : {}'.format(output))
    print('count  : {}'.format(iters))
    print('matrix : {}'.format(matrix))

    data = image_io.load_grid(file)
    height, width = data.shape[:2]
    print('width = {}, height = {}'.format(width, height))

    # Everything is checked before the first pass so a failed run writes nothing
    toral_map.check_grid(data, matrix, iters)
    if not is_bijective(width, height, matrix):
        warnings.warn('\n  Matrix {0} is not a bijection on a {1}x{2} grid. Some pixels will be overwritten.'.format(matrix, width, height))

    for i, data in enumerate(toral_map.toral_iterates(data, matrix, iters), start=1):
        if saveall and i < iters:
            image_io.save_grid(data, image_io.step_name(output, i))
    image_io.save_grid(data, output)

if __name__ == "__main__":
    args = parse_args()
    try:
        main(args.file, args.output, args.iters, args.matrix, saveall=args.saveall)
    except (OSError, ValueError, OverflowError) as e:
        sys.exit('error: {}'.format(e))
