from toadsfrogs.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]
