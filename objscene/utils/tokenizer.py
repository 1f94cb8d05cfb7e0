# objscene/utils/tokenizer.py
"""
Разбиение строки OBJ/MTL на ключевое слово и текст аргументов.
Чистые функции, без состояния.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple, TypeVar

from objscene.errors import MalformedAttribute

T = TypeVar("T")


def strip_line(raw: str) -> str:
    """Обрезать пробелы и комментарий (всё начиная с первого '#')."""
    line = raw.strip()
    comment = line.find("#")
    if comment != -1:
        line = line[:comment].rstrip()
    return line


def split_directive(raw: str) -> Optional[Tuple[str, str]]:
    """
    ``None`` для пустой строки / комментария, иначе ``(keyword, arguments)``.
    Аргументы – остаток строки после первого разделителя, без дальнейшей обрезки.
    """
    line = strip_line(raw)
    if not line:
        return None
    parts = line.split(None, 1)
    if len(parts) == 1:
        return parts[0], ""
    keyword = parts[0]
    # отрезаем только один разделитель после ключевого слова
    return keyword, line[len(keyword) + 1:]


def read_components(text: str, kind: Callable[[str], T] = float) -> list[T]:
    """Разбить аргументы по пробелам и привести каждое поле к ``kind``."""
    components = []
    for field in text.split():
        try:
            components.append(kind(field))
        except ValueError:
            raise MalformedAttribute(
                f"Cannot read '{field}' as {getattr(kind, '__name__', kind)}"
            ) from None
    return components
