from eightpuzzle.engine.gamestate.state import PlaybackState

__all__ = ["PlaybackState"]
