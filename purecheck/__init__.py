"""
PureCheck - cosmetic ingredient risk resolution engine
"""

__version__ = "1.0.0"
