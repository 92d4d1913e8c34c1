import os

# Get the base directory of the package (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Packaged romanization styles (one JSON file per style)
STYLES_DIR = os.path.join(BASE_DIR, 'data', 'styles')

DEFAULT_STYLE = 'hepburn_modified'

__version__ = '0.1.0'
