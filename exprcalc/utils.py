import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def point_at(code: str, idx: int, context: int = 10) -> tuple[str, str]:
    """Excerpt of ``code`` around ``idx`` and a matching line with a caret under it"""
    idx = min(max(idx, 0), len(code))
    start_idx = max(0, idx - context)
    ellipsis_pre = start_idx > 0
    end_idx = min(len(code), idx + context)
    ellipsis_post = end_idx < len(code)
    excerpt = ("..." if ellipsis_pre else "") + code[start_idx:end_idx] + ("..." if ellipsis_post else "")
    caret = " " * (idx - start_idx + (3 if ellipsis_pre else 0)) + "^"
    return excerpt, caret
