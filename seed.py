# movies every fresh store starts with
from models import Director, Movie

SEED_MOVIES = [
    Movie(name="Movie1", rating=8.4, director=Director(name="John", age=84)),
    Movie(name="Movie2", rating=9.0, director=Director(name="John", age=84)),
]

def seed_store(store):
    # ids are generated by the store, so every seeding gets fresh ones
    return [store.add(m) for m in SEED_MOVIES]
