"""Cast helpers for setting values.

Environment variables always arrive as strings; the JSON settings file may
already hold native types. These callables normalise both.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence


class Csv:
    """Comma-separated setting to a list, e.g. a list of ``strptime`` formats.

    Lists and tuples (native JSON arrays) are taken element by element.

    >>> Csv()("%d/%m/%Y, %Y-%m-%d")
    ['%d/%m/%Y', '%Y-%m-%d']
    >>> Csv(cast=int, post_process=tuple)("1,2,3")
    (1, 2, 3)
    """

    def __init__(
        self,
        cast: Callable[[str], Any] = str,
        delimiter: str = ",",
        strip: bool = True,
        post_process: Callable[[list], Any] | None = None,
    ) -> None:
        self.cast = cast
        self.delimiter = delimiter
        self.strip = strip
        self.post_process = post_process

    def _split(self, text: str) -> list[Any]:
        items = []
        for part in text.split(self.delimiter):
            if self.strip:
                part = part.strip()
            if part:
                items.append(self.cast(part))
        return items

    def __call__(self, value: Any) -> Any:
        items = list(value) if isinstance(value, (list, tuple)) else self._split(str(value))
        return items if self.post_process is None else self.post_process(items)


class Choices:
    """Accept only one of *choices*, after applying *cast*.

    >>> Choices(["DEBUG", "INFO"], cast=str.upper)("info")
    'INFO'
    """

    def __init__(
        self,
        choices: Sequence[Any],
        cast: Callable[[Any], Any] = str,
    ) -> None:
        self.choices = choices
        self.cast = cast

    def __call__(self, value: Any) -> Any:
        casted = self.cast(value)
        if casted not in self.choices:
            raise ValueError(
                f"{casted!r} is not a valid choice. Must be one of {list(self.choices)}"
            )
        return casted
