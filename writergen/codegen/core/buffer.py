"""
Line buffer for generated source files.

Lines are appended in order with the current indentation. Blocks and
modules are opened with context managers that always emit their closing
line, and ``build`` turns the buffer into an immutable document that is
written to disk once.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from ...logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Document:
    """Complete content of one generated file."""

    file_name: str
    lines: Tuple[str, ...]
    extension: str = ".rb"
    line_ending: str = "\n"
    class_name: Optional[str] = None

    @property
    def path(self) -> str:
        """Relative path of the file, including the extension."""
        return f"{self.file_name}{self.extension}"

    def render(self) -> str:
        return self.line_ending.join(self.lines) + self.line_ending

    def write(self, out_dir: Union[str, Path]) -> Path:
        """
        Write the document below the output directory.

        Parent directories are created as needed. I/O errors propagate to
        the caller.

        Returns:
            Path of the written file
        """
        target = Path(out_dir) / self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(self.render())
        logger.debug("Wrote %s", target)
        return target


class CodeBuffer:
    """Append-only, indentation aware builder of source lines."""

    def __init__(
        self,
        file_name: str,
        indent: str = "  ",
        extension: str = ".rb",
        line_ending: str = "\n",
        class_name: Optional[str] = None,
    ):
        self.file_name = file_name
        self.class_name = class_name
        self.indent = indent
        self.extension = extension
        self.line_ending = line_ending
        self._lines: List[str] = []
        self._level = 0
        self._built = False

    @property
    def lines(self) -> Tuple[str, ...]:
        return tuple(self._lines)

    def add_line(self, template: str = "", *args) -> None:
        """
        Append a line at the current indentation.

        When arguments are given the template is formatted with
        ``str.format``. Blank lines carry no indentation.
        """
        if self._built:
            raise RuntimeError(f"Buffer for {self.file_name} was already built")
        text = template.format(*args) if args else template
        if text:
            self._lines.append(self.indent * self._level + text)
        else:
            self._lines.append("")

    def comment(self, text: str) -> None:
        """Append a comment line, or ``#`` alone for an empty text."""
        self.add_line(f"# {text}" if text else "#")

    @contextmanager
    def indented(self) -> Iterator[None]:
        self._level += 1
        try:
            yield
        finally:
            self._level -= 1

    @contextmanager
    def block(self, header: str, footer: str = "end") -> Iterator[None]:
        """Emit a header, an indented body and a closing footer."""
        self.add_line(header)
        try:
            with self.indented():
                yield
        finally:
            self.add_line(footer)

    @contextmanager
    def module(self, module_name: str) -> Iterator[None]:
        """Open one nested ``module`` per ``::`` segment of the module name."""
        segments = module_name.split("::")
        for segment in segments:
            self.add_line("module {0}", segment)
            self._level += 1
        try:
            yield
        finally:
            for _ in segments:
                self._level -= 1
                self.add_line("end")

    def build(self) -> Document:
        """Finish the buffer and return its immutable document."""
        self._built = True
        return Document(
            file_name=self.file_name,
            lines=tuple(self._lines),
            extension=self.extension,
            line_ending=self.line_ending,
            class_name=self.class_name,
        )
