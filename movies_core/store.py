import logging
import threading
import uuid
from typing import List, Tuple

from flask import current_app

from models import Movie

logger = logging.getLogger(__name__)

EXTENSION_KEY = "movie_store"


class MovieNotFound(LookupError):
    def __init__(self, name: str):
        super().__init__(f"movie not found: {name!r}")
        self.name = name


def generate_unique_id() -> str:
    return str(uuid.uuid4())


class MovieStore:
    """
    Ordered in-memory collection of movies.

    Every operation takes the same lock, so readers always see a whole
    sequence, never one halfway through an append or a removal. Movies are
    frozen dataclasses; handing them out does not expose store state.
    """

    def __init__(self):
        self._movies: List[Movie] = []
        self._lock = threading.Lock()

    def init_app(self, app):
        app.extensions[EXTENSION_KEY] = self

    def __len__(self):
        with self._lock:
            return len(self._movies)

    def list(self) -> List[Movie]:
        with self._lock:
            return list(self._movies)

    def add(self, movie: Movie) -> Movie:
        if not movie.id:
            movie = movie.with_id(generate_unique_id())
        with self._lock:
            self._movies.append(movie)
        logger.debug("stored movie %s (%r)", movie.id, movie.name)
        return movie

    def _index_of(self, name: str) -> int:
        # caller holds the lock
        for index, movie in enumerate(self._movies):
            if movie.name == name:
                return index
        raise MovieNotFound(name)

    def find_by_name(self, name: str) -> Tuple[int, Movie]:
        with self._lock:
            index = self._index_of(name)
            return index, self._movies[index]

    def delete_by_name(self, name: str) -> List[Movie]:
        with self._lock:
            index = self._index_of(name)
            removed = self._movies.pop(index)
            remaining = list(self._movies)
        logger.debug("removed movie %s (%r) at position %d", removed.id, removed.name, index)
        return remaining

    def clear(self):
        with self._lock:
            self._movies.clear()


def get_store() -> MovieStore:
    return current_app.extensions[EXTENSION_KEY]
