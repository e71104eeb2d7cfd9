from .board_encoder import BoardEncoder

__all__ = ['BoardEncoder']
