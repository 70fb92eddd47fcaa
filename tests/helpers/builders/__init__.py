from .intent_builder import PositionBuilder

__all__ = ["PositionBuilder"]
