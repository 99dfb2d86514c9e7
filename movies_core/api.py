import logging

from flask import Blueprint, abort, jsonify

from models import Director, Movie
from .metrics import count_store_op
from .errors import read_json, validate_text, parse_rating, parse_age, validate_director
from .store import MovieNotFound, get_store

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)  # blueprint for the movie routes

def director_to_dict(d: Director | None):
    if d is None:
        return None
    return {"name": d.name, "age": d.age}

def movie_to_dict(m: Movie):
    return {
        "name": m.name,
        "id": m.id,
        "rating": m.rating,
        "director": director_to_dict(m.director),
    }

def movie_from_dict(data) -> Movie:
    director = validate_director(data.get("director"))
    if director is not None:
        director = Director(
            name=validate_text(director.get("name"), "director.name"),
            age=parse_age(director.get("age")),
        )
    return Movie(
        name=validate_text(data.get("name"), "name"),
        id=validate_text(data.get("id"), "id"),
        rating=parse_rating(data.get("rating")),
        director=director,
    )

@api_bp.get("/list")
def list_movies():
    return jsonify([movie_to_dict(m) for m in get_store().list()])

@api_bp.post("/add")
def add_movie():
    data = read_json()
    m = get_store().add(movie_from_dict(data))
    count_store_op("add")
    logger.info("Added movie %r with id %s", m.name, m.id)
    return movie_to_dict(m)

@api_bp.get("/getby/", defaults={"name": ""})
@api_bp.get("/getby/<name>")
def get_movie_by_name(name):
    if not name:
        abort(404, "Movie not found in request")
    try:
        _, m = get_store().find_by_name(name)
    except MovieNotFound:
        count_store_op("find", "not_found")
        abort(404, "Movie not found in database")
    count_store_op("find")
    return movie_to_dict(m)

@api_bp.delete("/delete/<name>")
def delete_movie_by_name(name):
    try:
        remaining = get_store().delete_by_name(name)
    except MovieNotFound:
        count_store_op("delete", "not_found")
        abort(404, "Name not found in database")
    count_store_op("delete")
    logger.info("Deleted movie %r, %d left", name, len(remaining))
    return jsonify([movie_to_dict(m) for m in remaining])
