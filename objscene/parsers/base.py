# objscene/parsers/base.py
"""
Общий жизненный цикл парсеров OBJ/MTL.

Вместо «открытый поток = состояние парсера» используется явная фаза:

    IDLE ──parse()──▶ PARSING ──(успех/ошибка)──▶ CLOSED ──clear()──▶ IDLE

Файл принадлежит парсеру только на время одного вызова parse() и
закрывается на любом пути выхода.
"""

from __future__ import annotations

from enum import Enum, auto
from pathlib import Path
from typing import Iterable

from objscene.errors import AlreadyOpen, CannotOpenFile, ParseError, WrongExtension
from objscene.utils.config import Config
from objscene.utils.logger import logger
from objscene.utils.tokenizer import split_directive


class ParserPhase(Enum):
    IDLE = auto()
    PARSING = auto()
    CLOSED = auto()


class BaseParser:
    """Фазы, проверка расширения, построчная диспетчеризация директив."""

    extension = ""
    name = "Parser"

    def __init__(self, config: Config | None = None):
        # уровень логгера общий на процесс – парсер его не трогает (см. load_obj)
        self.config = config if config is not None else Config()
        self.phase = ParserPhase.IDLE
        self.source: str | None = None

    # -----------------------------------------------------------------
    # то, что реализуют наследники
    # -----------------------------------------------------------------
    def _reset(self) -> None:
        raise NotImplementedError()

    def _dispatch(self, keyword: str, arguments: str) -> None:
        raise NotImplementedError()

    def _summary(self) -> str:
        return ""

    # -----------------------------------------------------------------
    # публичный API
    # -----------------------------------------------------------------
    def parse(self, path: str | Path) -> "BaseParser":
        """Разобрать файл. Любая ошибка – исключение из objscene.errors."""
        path = str(path)
        self._begin(path)
        try:
            # расширение проверяется по «сырому» имени, с учётом регистра
            if not path.endswith(self.extension):
                raise WrongExtension(f"File is not a {self.extension} file: {path}")
            try:
                stream = open(path, "r", encoding="utf-8")
            except OSError as exc:
                raise CannotOpenFile(f"Failed to open file: {path} ({exc})") from exc
            with stream:
                self._run(stream)
        except ParseError as exc:
            self._fail(exc)
            raise
        except (OSError, UnicodeDecodeError) as exc:
            # чтение оборвалось посреди файла (например, поток закрыли извне)
            error = CannotOpenFile(f"Failed to read file: {path} ({exc})", source=path)
            self._fail(error)
            raise error from exc
        finally:
            self.phase = ParserPhase.CLOSED
        return self

    def parse_lines(self, lines: Iterable[str], source: str = "<memory>") -> "BaseParser":
        """Разобрать уже открытый источник строк (без проверки расширения)."""
        self._begin(source)
        try:
            self._run(lines)
        except ParseError as exc:
            self._fail(exc)
            raise
        finally:
            self.phase = ParserPhase.CLOSED
        return self

    def try_parse(self, path: str | Path) -> bool:
        """Как parse(), но вместо исключения возвращает статус."""
        try:
            self.parse(path)
        except ParseError:
            return False
        return True

    def clear(self) -> None:
        """Сбросить накопленные данные и вернуться в фазу IDLE."""
        self._reset()
        self.source = None
        self.phase = ParserPhase.IDLE

    # -----------------------------------------------------------------
    # внутреннее
    # -----------------------------------------------------------------
    def _begin(self, source: str) -> None:
        if self.phase is not ParserPhase.IDLE:
            error = AlreadyOpen(
                f"Parser is {self.phase.name.lower()}; call clear() before parsing again",
                source=source,
            )
            logger.error(f"[{self.name}] Error: {error}")
            raise error
        self.phase = ParserPhase.PARSING
        self.source = source
        self._reset()

    def _run(self, lines: Iterable[str]) -> None:
        line_number = 0
        for line_number, raw in enumerate(lines, start=1):
            directive = split_directive(raw)
            if directive is None:
                continue
            try:
                self._dispatch(*directive)
            except ParseError as exc:
                exc.locate(self.source, line_number)
                raise
        logger.info(f"[{self.name}] Parsed {self.source} ({line_number} lines){self._summary()}")

    def _fail(self, error: ParseError) -> None:
        if error.source is None:
            error.source = self.source
        logger.error(f"[{self.name}] Error: {error}")
