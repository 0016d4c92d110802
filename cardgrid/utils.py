def parse_category_count(raw) -> int:
    """Normalize a user-typed category count to a non-negative int.

    Example: "3" -> 3, " 2 " -> 2, "-1" -> 0, "abc" -> 0, "" -> 0
    """
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return max(raw, 0)
    try:
        count = int(str(raw).strip())
    except (TypeError, ValueError):
        return 0
    return max(count, 0)


def slot_name(category_id: int, index: int) -> str:
    """Stable display name of a slot, e.g. (2, 7) -> "2:7"."""
    return f"{category_id}:{index}"
