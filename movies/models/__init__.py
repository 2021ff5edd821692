from .movies import Director, Movie

__all__ = ["Director", "Movie"]
