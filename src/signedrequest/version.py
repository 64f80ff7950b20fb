"""Version information for signedrequest"""

__version__ = "1.0.0"
