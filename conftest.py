"""
Root conftest.py for envconfig.

Ensures the project root is in sys.path before any tests are collected, so
the envconfig package imports without installation.
"""

import os
import sys

project_root = os.path.dirname(os.path.abspath(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)
