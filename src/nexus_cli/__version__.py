"""
Package version info.
"""
__version__ = "0.1.0"
__author__ = "Nexus-CLI contributors"
