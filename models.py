from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Director:  # owned by its movie, no identity of its own
    name: str = ""
    age: int = 0

    def __repr__(self):
        return f"<Director {self.name!r} {self.age}>"


@dataclass(frozen=True)
class Movie:  # movie record
    name: str = ""  # lookup key, not unique
    id: str = ""
    rating: float = 0.0
    director: Optional[Director] = None

    def with_id(self, movie_id: str) -> "Movie":
        return replace(self, id=movie_id)

    def __repr__(self):
        return f"<Movie {self.id} {self.name!r}>"
