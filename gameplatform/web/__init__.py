"""
Web interface module for the game platform.

Provides the FastAPI-based session endpoints:
- Creating a player identifier
- Setting the player name
- Clearing the session cookies
"""
