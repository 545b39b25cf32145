import random
import string
import time

BASE36_ALPHABET = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value < 0:
        raise ValueError(f"Cannot base36-encode negative value: {value}")
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def unique_id() -> str:
    """Short, likely-unique id: base36 epoch millis plus six random chars."""
    date_str = to_base36(int(time.time() * 1000))
    random_str = "".join(random.choice(BASE36_ALPHABET) for _ in range(6))
    return f"{date_str}-{random_str}"
