"""Local ids for sections, lessons and questions added inside a draft."""
import time

_last_stamp = 0


def generate_local_id(prefix: str) -> str:
    """
    Build an id for a nested entity (section, lesson, question) at add-time.

    The id is "<prefix>_<epoch millis>". Stamps are strictly increasing within
    one process, so two adds in the same millisecond still differ. Ids are not
    unique across concurrent editors in different processes.
    """
    global _last_stamp
    now = int(time.time() * 1000)
    _last_stamp = now if now > _last_stamp else _last_stamp + 1
    return f"{prefix}_{_last_stamp}"
