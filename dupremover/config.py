"""
Configuration constants for Image Duplicate Remover.

This module contains the built-in defaults:
- Supported image extensions
- Fingerprint key and worker count used when nothing else is configured
"""

import os

# All supported image extensions
IMAGE_EXTENSIONS = {
    # Common formats
    '.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.tiff', '.tif',
    # RAW formats
    '.raw', '.cr2', '.cr3', '.nef', '.arw', '.dng', '.orf', '.rw2',
    '.pef', '.srw', '.raf',
    # Other formats
    '.ico', '.psd', '.svg', '.heic', '.heif', '.avif', '.jxl',
    '.pbm', '.pgm', '.ppm', '.pnm', '.tga',
}

# Fingerprint used for matching when none is given ('sha256' or 'filesize')
DEFAULT_KEY = 'sha256'

# Default number of parallel workers for hashing and matching
DEFAULT_WORKERS = 4

# Bytes read per iteration when hashing file contents
HASH_CHUNK_SIZE = 65536

# User configuration directory (under the home directory)
CONFIG_DIR_NAME = '.dupremover'
CONFIG_DIR = os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME)
