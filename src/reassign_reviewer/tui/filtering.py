"""Pure filtering logic for the selection list."""


def filter_items(items: list[str], query: str) -> list[int]:
    """Return the indices of items matching query.

    Case-insensitive substring match. An empty query matches everything.

    Args:
        items: Display strings in their original order
        query: Search query typed by the user

    Returns:
        Indices into items, in original order
    """
    if not query:
        return list(range(len(items)))

    query_lower = query.lower()
    return [index for index, item in enumerate(items) if query_lower in item.lower()]
