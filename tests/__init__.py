# tests/__init__.py

"""
Testing Package for ID3 Decision Tree
"""

VERSION = "0.1.0"
