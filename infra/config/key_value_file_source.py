from __future__ import annotations

from pathlib import Path

from domain.utils import split_assignment


class KeyValueFileError(ValueError):
    """A seed file line that cannot be read as ``key=value``."""

    def __init__(self, path: Path, line_number: int, reason: str) -> None:
        super().__init__(f"{path}:{line_number}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason


class KeyValueFileSource:
    """Reads a ``key=value`` seed file into an initial config mapping.

    Blank lines and ``#`` comments are skipped and a leading UTF-8
    byte-order mark is dropped. Every public method re-reads from disk;
    nothing is ever written back.
    """

    def __init__(self, path: str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self._path.is_file():
            errors.append(f"Missing file: {self._path}")
            return errors
        try:
            text = self._path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            errors.append(f"Cannot read {self._path}: {exc}")
            return errors

        seen: dict[str, int] = {}
        for line_number, line in self._content_lines(text):
            parsed = split_assignment(line)
            if parsed is None:
                errors.append(self._describe_bad_line(line_number, line))
                continue
            key = parsed[0]
            if key in seen:
                errors.append(
                    f"{self._path.name}:{line_number}: duplicate key '{key}' "
                    f"(first defined on line {seen[key]})"
                )
            else:
                seen[key] = line_number
        return errors

    def load(self) -> dict[str, str]:
        text = self._path.read_text(encoding="utf-8-sig")
        entries: dict[str, str] = {}
        for line_number, line in self._content_lines(text):
            parsed = split_assignment(line)
            if parsed is None:
                reason = "missing '='" if "=" not in line else "empty key"
                raise KeyValueFileError(self._path, line_number, reason)
            key, value = parsed
            entries[key] = value
        return entries

    # -- internal helpers ---------------------------------------------------

    @staticmethod
    def _content_lines(text: str) -> list[tuple[int, str]]:
        lines = []
        for line_number, raw in enumerate(text.splitlines(), start=1):
            stripped = raw.strip()
            if not stripped or stripped.startswith("#"):
                continue
            lines.append((line_number, stripped))
        return lines

    def _describe_bad_line(self, line_number: int, line: str) -> str:
        if "=" not in line:
            return f"{self._path.name}:{line_number}: expected key=value, got '{line}'"
        return f"{self._path.name}:{line_number}: empty key in '{line}'"
