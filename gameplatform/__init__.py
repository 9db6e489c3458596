"""
Game Platform session manager.

Issues player identifiers, collects display names and renders the
landing, name and welcome views from the session cookies.
"""
