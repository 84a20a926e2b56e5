"""No Response - close issues whose authors never answered a request for information"""

__version__ = "1.0.0"
