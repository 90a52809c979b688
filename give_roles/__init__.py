"""
Roles and capabilities for the Give donation plugin.
"""

import os

__version__ = "1.0.0"

ROOT_DIRECTORY = os.path.dirname(os.path.abspath(__file__))
