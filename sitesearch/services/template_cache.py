from typing import Callable, Dict


class TemplateCache:
    """In-process store for serialized query templates, keyed by context node identifier.

    Entries never expire; flush() drops them all.
    """

    def __init__(self):
        self._entries: Dict[str, str] = {}

    def has(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> str:
        return self._entries[key]

    def set(self, key: str, value: str) -> None:
        self._entries[key] = value

    def flush(self) -> None:
        self._entries.clear()

    def get_or_compute(self, key: str, builder: Callable[[], str]) -> str:
        """Return the cached template for key, building and storing it when missing.

        Two callers racing on a missing key may both run the builder; the
        first value stored is the one every caller gets back.
        """
        template = self._entries.get(key)
        if template is None:
            template = self._entries.setdefault(key, builder())
        return template

    def __len__(self) -> int:
        return len(self._entries)
