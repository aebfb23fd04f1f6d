"""Ordered, field-keyed error messages."""

from typing import Any, Dict, Iterator, List, Mapping, Tuple

BASE = "base"


def _humanize(field: str) -> str:
    return field.replace("_", " ").strip().capitalize()


class ErrorCollection:
    """
    Ordered multimap from field name to human-readable messages.

    Messages that concern the whole object are stored under :data:`BASE`.
    Fields keep the order in which they first received a message, and
    messages keep insertion order within a field.
    """

    def __init__(self) -> None:
        self._messages: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._messages.setdefault(field, []).append(message)

    def messages_for(self, field: str) -> List[str]:
        return list(self._messages.get(field, ()))

    __getitem__ = messages_for

    def fields(self) -> List[str]:
        return list(self._messages)

    def merge(self, other: Any) -> "ErrorCollection":
        """
        Append every message of ``other`` after the existing ones.

        ``other`` may be another collection, a mapping of field to messages,
        or any object exposing one of those as ``errors``. Nothing is
        deduplicated.
        """
        source = getattr(other, "errors", other)
        if isinstance(source, ErrorCollection):
            pairs: List[Tuple[str, str]] = list(source)
        elif isinstance(source, Mapping):
            pairs = []
            for field, messages in source.items():
                if isinstance(messages, str):
                    messages = [messages]
                pairs.extend((field, message) for message in messages)
        else:
            raise TypeError(f"Cannot merge errors from {type(other).__name__}")
        for field, message in pairs:
            self.add(field, message)
        return self

    def clear(self) -> None:
        self._messages.clear()

    def to_dict(self) -> Dict[str, List[str]]:
        return {field: list(messages) for field, messages in self._messages.items()}

    def full_messages(self) -> List[str]:
        return [
            message if field == BASE else f"{_humanize(field)} {message}"
            for field, message in self
        ]

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        for field, messages in self._messages.items():
            for message in messages:
                yield field, message

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __contains__(self, field: object) -> bool:
        return bool(self._messages.get(field))  # type: ignore[call-overload]

    def __repr__(self) -> str:
        return f"ErrorCollection({self.to_dict()!r})"
