from boundednumbers import clamp


def clamp_index(index: int, length: int) -> int:
    """Saturate ``index`` into ``[0, length - 1]``."""
    return int(clamp(index, 0, length - 1))
