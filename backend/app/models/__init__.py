from .idea import Idea

__all__ = ["Idea"]
