"""
Canvas Converter - CSS value resolution for markup-to-canvas conversion.
"""

import logging

# Library code never configures handlers; applications call utils.logging.setup_logging()
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "0.1.0"
__author__ = "Canvas Converter Team"
__description__ = "CSS value resolution engine for converting markup trees into design-canvas nodes"
