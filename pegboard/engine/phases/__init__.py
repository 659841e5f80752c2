"""Phase handlers driven by :class:`pegboard.engine.game.CribbageGame`."""
