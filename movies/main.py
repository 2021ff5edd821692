from fastapi import FastAPI, Depends, Request, Response, status
from typing import List
from .models.movies import Movie
from .database.db import MovieStore, get_store, init_store
import json
import logging
import os

# names understood by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL", "TRACE": "DEBUG"}


def resolve_log_level(value: str) -> str:
    level = value.strip().upper()
    level = LOG_LEVEL_ALIASES.get(level, level)
    return level if level in LOG_LEVELS else "INFO"


LOG_LEVEL = resolve_log_level(os.getenv("LOG_LEVEL", "INFO"))
ENABLE_DOCS = os.getenv("MOVIES_ENABLE_DOCS", "false").lower() == "true"

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movies service",
    description="In-memory API for managing a movie list",
    version="1.0.0",
    docs_url="/docs" if ENABLE_DOCS else None,
    redoc_url="/redoc" if ENABLE_DOCS else None,
    openapi_url="/openapi.json" if ENABLE_DOCS else None
)


@app.on_event("startup")
async def startup_event():
    logger.info("Launching the movie service...")
    init_store()
    logger.info("The service is ready to work")


async def read_movie(request: Request) -> Movie:
    body = await request.body()
    try:
        return Movie.model_validate(json.loads(body))
    except (ValueError, RecursionError) as e:
        logger.warning(f"Ignoring undecodable movie body: {type(e).__name__}")
        return Movie()


@app.get("/movies",
         response_model=List[Movie],
         summary="Get a list of all movies")
async def get_movies(store: MovieStore = Depends(get_store)):
    movies = store.list()
    logger.info(f"A list of movies was requested, {len(movies)} entries were found")
    return movies


@app.get("/movies/{movie_id}",
         response_model=Movie,
         summary="Get a movie by ID",
         responses={
             200: {"description": "The movie, or an empty body if the ID is unknown"}
         })
async def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    movie = store.find_by_id(movie_id)
    if movie is None:
        logger.warning(f"A non-existent movie ID was requested {movie_id}")
        return Response(status_code=status.HTTP_200_OK, media_type="application/json")
    logger.info(f"Movie ID requested {movie_id}: {movie.title}")
    return movie


@app.post("/movies",
          response_model=Movie,
          status_code=status.HTTP_200_OK,
          summary="Add a new movie",
          response_description="The data of the created movie")
async def create_movie(request: Request, store: MovieStore = Depends(get_store)):
    movie = store.create(await read_movie(request))
    logger.info(f"A new movie has been added: ID {movie.id}, {movie.title}")
    return movie


@app.put("/movies/{movie_id}",
         response_model=Movie,
         summary="Replace movie data",
         response_description="The movie as stored under the path ID")
async def update_movie(movie_id: str, request: Request, store: MovieStore = Depends(get_store)):
    movie = await read_movie(request)
    store.replace_by_id(movie_id, movie)
    logger.info(f"Updated movie ID {movie_id}: {movie.title}")
    return movie


@app.delete("/movies/{movie_id}",
            response_model=List[Movie],
            summary="Delete a movie",
            response_description="The movies that remain")
async def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    if store.delete_by_id(movie_id):
        logger.info(f"Deleted movie ID {movie_id}")
    else:
        logger.warning(f"Attempt to delete a non-existent movie ID {movie_id}")
    return store.list()
