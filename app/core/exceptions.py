class MovieServiceError(Exception):
    code = "MOVIE_SERVICE_ERROR"
    message = "Movie service failed"

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)

class MovieNotFoundError(MovieServiceError):
    code = "MOVIE_NOT_FOUND"
    message = "Movie not found"

class InvalidMovieError(MovieServiceError):
    code = "INVALID_MOVIE"
    message = "The movie payload is invalid"
