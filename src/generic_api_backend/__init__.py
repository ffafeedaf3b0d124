'''
Configuration and credential utilities shared by the Generic API backend.
'''
__version__ = "0.1.0"
