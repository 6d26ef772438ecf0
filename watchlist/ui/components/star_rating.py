"""
Star rating display.
"""


def format_stars(rating: int | None) -> str:
    """Render a 1-5 rating as filled/empty stars, or 'No rating'."""
    if not rating or rating < 1:
        return "No rating"
    filled = min(rating, 5)
    return "★" * filled + "☆" * (5 - filled)
