"""
Helper functions for formatting data into human-readable strings.
"""


def format_duration(seconds: float) -> str:
    """
    Formats a duration in seconds into a human-readable string (e.g., '2h 34m 12s').
    """
    s = int(seconds)
    hours, remainder = divmod(s, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:
        parts.append(f"{secs}s")
    return " ".join(parts)


def collection_label(key: str) -> str:
    """Display label for a collection key, e.g. 'mn' -> 'MN'."""
    return key.upper()


def author_label(author: str) -> str:
    """Display label for an author identifier, e.g. 'sujato' -> 'Sujato'."""
    return author[:1].upper() + author[1:]


def progress_text(current: int, total: int) -> str:
    return f"Processing {current} of {total} items..."


def progress_percentage(current: int, total: int) -> float:
    """Share of items processed, as a percentage. An empty run counts as done."""
    if total <= 0:
        return 100.0
    return current / total * 100
