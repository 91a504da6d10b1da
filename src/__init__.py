"""
Alien Invasion: Earth Defense - Source Package
==============================================

Modules:
    game/     - Simulation core (entities, tick loop, phases, snapshots)
    frontend/ - pygame host (keyboard, renderer, sound board)
    utils/    - Logging
"""

__version__ = "1.0.0"
