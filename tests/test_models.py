import os, pytest, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from werkzeug.exceptions import BadRequest

from models import Director, Movie
from movies_core.api import movie_from_dict, movie_to_dict


def test_movie_to_dict_wire_shape():
    m = Movie(name="Heat", id="x1", rating=8.3, director=Director("Mann", 81))
    assert movie_to_dict(m) == {
        "name": "Heat",
        "id": "x1",
        "rating": 8.3,
        "director": {"name": "Mann", "age": 81},
    }

def test_absent_director_is_null():
    assert movie_to_dict(Movie(name="Solo"))["director"] is None

def test_missing_fields_take_zero_values():
    m = movie_from_dict({"director": {}})
    assert m == Movie(name="", id="", rating=0.0, director=Director("", 0))

def test_unknown_fields_ignored():
    m = movie_from_dict({"name": "A", "year": 1999})
    assert m == Movie(name="A")

def test_integer_rating_becomes_float():
    m = movie_from_dict({"rating": 7})
    assert isinstance(m.rating, float) and m.rating == 7.0

@pytest.mark.parametrize("data", [
    {"id": 12},
    {"rating": [1]},
    {"director": []},
    {"director": {"name": 5}},
    {"director": {"age": "84"}},
    {"director": {"age": -129}},
    {"rating": float("nan")},
    {"rating": float("inf")},
    {"rating": 10 ** 400},
])
def test_shape_errors(data):
    with pytest.raises(BadRequest):
        movie_from_dict(data)

@pytest.mark.parametrize("movie", [
    Movie(name="Movie3", id="abc", rating=7.5),
    Movie(name="Heat", id="x1", rating=8.3, director=Director("Mann", 81)),
    Movie(),
])
def test_round_trip(movie):
    assert movie_from_dict(movie_to_dict(movie)) == movie

def test_with_id_returns_copy():
    m = Movie(name="A")
    m2 = m.with_id("new")
    assert m.id == "" and m2.id == "new" and m2.name == "A"
