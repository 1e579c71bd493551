"""
MEV Academy backend.

An educational API that explains Maximal Extractable Value: MEV transaction
classification, arbitrage estimates, gas-fee outlooks and front-running
protection advice for the dashboard frontend.
"""

__version__ = "1.0.0"
