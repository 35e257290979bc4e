from eightpuzzle.engine.gamegenerator.generator import DEFAULT_SCRAMBLE_MOVES, GameGenerator

__all__ = ["DEFAULT_SCRAMBLE_MOVES", "GameGenerator"]
