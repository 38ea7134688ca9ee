"""
Reading and writing pixel grids as image files.
"""

import os
import numpy as np
from PIL import Image

def load_grid(file):
    """ Loads an image file as an RGB uint8 array of shape (H,W,3). PIL indexes from the upper left. """
    with Image.open(file, mode='r') as img:
        return np.array(img.convert('RGB'))

def save_grid(data, file):
    """ Saves a grid to file. The format follows the extension. """
    img = Image.fromarray(data)
    img.save(file)
    img.close()

def is_writable_format(file):
    """ True if PIL knows an image format for the extension of file. """
    ext = os.path.splitext(file)[1].lower()
    return ext in Image.registered_extensions()

def default_output(file):
    """ 'output' with the extension of the input file, e.g. cat.jpg -> output.jpg """
    ext = os.path.splitext(file)[1]
    if not ext:
        ext = '.png'
    return 'output' + ext

def step_name(file, i):
    """ Name for the i-th intermediate iteration, e.g. output.png -> output-3.png """
    root, ext = os.path.splitext(file)
    return '{0}-{1}{2}'.format(root, i, ext)
