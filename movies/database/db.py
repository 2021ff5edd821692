from typing import List, Optional
from ..models.movies import Director, Movie
import random
import threading
import logging
import os

logger = logging.getLogger(__name__)

SEED_MOVIES = os.getenv("MOVIES_SEED", "true").lower() == "true"
ID_RANGE = 1000000


class MovieStore:
    def __init__(self, rng: Optional[random.Random] = None):
        self._movies: List[Movie] = []
        self._lock = threading.Lock()
        self._rng = rng or random.Random()

    def list(self) -> List[Movie]:
        with self._lock:
            return list(self._movies)

    def find_by_id(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            return self._find(movie_id)

    def insert(self, movie: Movie) -> Movie:
        with self._lock:
            self._movies.append(movie)
        return movie

    def create(self, movie: Movie) -> Movie:
        with self._lock:
            movie.id = self._new_id()
            self._movies.append(movie)
        return movie

    def replace_by_id(self, movie_id: str, movie: Movie) -> Movie:
        with self._lock:
            self._remove(movie_id)
            movie.id = movie_id
            self._movies.append(movie)
        return movie

    def delete_by_id(self, movie_id: str) -> bool:
        with self._lock:
            return self._remove(movie_id)

    def reset(self):
        with self._lock:
            self._movies.clear()

    def seed(self):
        self.insert(Movie(
            id="1",
            isbn="438227",
            title="Movie One",
            director=Director(firstname="John", lastname="Doe")
        ))
        self.insert(Movie(
            id="2",
            isbn="454555",
            title="Movie Two",
            director=Director(firstname="Steve", lastname="Smith")
        ))

    def __len__(self):
        with self._lock:
            return len(self._movies)

    # callers below must hold self._lock

    def _find(self, movie_id: str) -> Optional[Movie]:
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        return None

    def _remove(self, movie_id: str) -> bool:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                del self._movies[index]
                return True
        return False

    def _new_id(self) -> str:
        while True:
            candidate = str(self._rng.randrange(ID_RANGE))
            if self._find(candidate) is None:
                return candidate


store = MovieStore()


def init_store():
    store.reset()
    if SEED_MOVIES:
        store.seed()
        logger.info(f"Store seeded with {len(store)} movies")
    else:
        logger.info("Store started empty")


def get_store() -> MovieStore:
    return store
