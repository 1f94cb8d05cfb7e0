# objscene/errors.py
"""
Иерархия ошибок разбора OBJ/MTL.

Любая ошибка прерывает разбор целиком – частичный результат
считается невалидным и должен быть сброшен через ``clear()``.
"""

from __future__ import annotations


class ParseError(RuntimeError):
    """Базовая ошибка разбора. Хранит источник и номер строки (если известны)."""

    def __init__(self, message: str, source: str | None = None,
                 line_number: int | None = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.line_number = line_number

    def locate(self, source: str, line_number: int) -> "ParseError":
        """Привязать ошибку к месту во входном файле (если ещё не привязана)."""
        if self.source is None:
            self.source = source
        if self.line_number is None:
            self.line_number = line_number
        return self

    def __str__(self) -> str:
        if self.source is not None and self.line_number is not None:
            return f"[{self.source}:{self.line_number}]: {self.message}"
        if self.source is not None:
            return f"[{self.source}]: {self.message}"
        return self.message


class AlreadyOpen(ParseError):
    """parse() вызван повторно без clear()."""


class WrongExtension(ParseError):
    """Имя файла не оканчивается на ожидаемое расширение."""


class CannotOpenFile(ParseError):
    """Файл не существует или не читается."""


class EmptyDirectiveArgument(ParseError):
    """Директива требует имя/значение, а аргумент пуст."""


class MalformedAttribute(ParseError):
    """Числовое поле не разбирается."""


class WrongComponentCount(MalformedAttribute):
    """Неверное количество компонент у числовой директивы."""


class MalformedFaceIndex(ParseError):
    """Токен вершины грани (или линии) имеет неверный формат."""


class IndexOutOfRange(ParseError):
    """Ссылка на несуществующую позицию / texcoord / нормаль."""


class DegenerateFace(ParseError):
    """Грань содержит меньше углов, чем разрешено конфигурацией."""


class InvalidSmoothingOption(ParseError):
    """Аргумент ``s`` не равен ``1`` или ``off``."""


class UnknownDirective(ParseError):
    """Неизвестное ключевое слово."""


class MissingMaterial(ParseError):
    """Атрибут материала встретился раньше первого ``newmtl``."""
