from datetime import date

from fastapi import HTTPException, Path, Request, status

from app.services.storage import MemStorage

# Longer ids cannot name a stored record and would trip the int() digit limit
MAX_ID_DIGITS = 18


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def get_current_year() -> int:
    # Reference year for date-range formatting; overridden in tests
    return date.today().year


def parse_tournament_id(
    tournament_id: str = Path(..., description="Numeric ID of the tournament"),
) -> int:
    """
    Parses the id path segment ourselves so a malformed id is a 400
    with our error body rather than FastAPI's 422.
    """
    if (
        len(tournament_id) > MAX_ID_DIGITS
        or not (tournament_id.isascii() and tournament_id.isdigit())
        or int(tournament_id) < 1
    ):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid ID format")
    return int(tournament_id)
