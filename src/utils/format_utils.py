from datetime import datetime


def format_created_at(created_at: datetime) -> str:
    # Local time of the server process; timezone-aware values are converted.
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone()
    return created_at.strftime("%Y-%m-%d %H:%M")


def format_coords(lat: float, lng: float) -> str:
    return f"{lat:.4f}, {lng:.4f}"
