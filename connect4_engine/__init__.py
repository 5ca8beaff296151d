"""
connect4_engine - Connect Four game engine

This package implements the rules of Connect Four on boards of any size:
dimension validation, move processing, move-local win detection and game
sessions, together with a Gymnasium environment and a text front end.
"""

# Version number
__version__ = '0.1.0'
