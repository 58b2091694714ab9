# Snaketick Source Package
"""
Snaketick - grid Snake with a tick-stamp game-state engine.

Modules:
- core: Abstract interfaces for grid games and renderers
- game: Board model, snake kinematics, food placement, engine facade,
        input adapter, renderers and the tick driver
- utils: Configuration loading
"""
