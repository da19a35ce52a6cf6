def wrap_index(index: int, delta: int, length: int) -> int:
    """Move an index by delta, wrapping around a list of the given length"""
    if length <= 0:
        return 0
    return (index + delta) % length


def clamp_index(index: int, length: int) -> int:
    """Clamp an index into [0, length), or 0 for an empty list"""
    if length <= 0:
        return 0
    return min(max(index, 0), length - 1)
