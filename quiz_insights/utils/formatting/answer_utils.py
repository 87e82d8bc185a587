"""Answer flattening helpers shared by filtering, analytics and reports"""
from typing import Any, List


def has_answer(raw: Any) -> bool:
    """None, empty strings and empty selections count as no answer"""
    if raw is None:
        return False
    if isinstance(raw, (str, list, tuple)):
        return len(raw) > 0
    return True

def answer_tokens(raw: Any) -> List[str]:
    """Discrete tokens: one per checkbox selection, one for a non-empty scalar"""
    if isinstance(raw, (list, tuple)):
        return [str(item) for item in raw]
    if raw:
        return [str(raw)]
    return []

def flatten_answer(raw: Any, separator: str = " ") -> str:
    if isinstance(raw, (list, tuple)):
        return separator.join(str(item) for item in raw)
    if raw:
        return str(raw)
    return ""
