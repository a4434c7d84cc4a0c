# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result models returned by `Parser.parse()`.

- `ParseOutcome`: Whether one flag was present and the value it carried.
- `ResultTable`: Read-only mapping of flag match keys to their outcomes.

Every flag declared to the parser has an entry in the table after a
successful parse; absent optional flags map to `ParseOutcome(False, "")`.
Querying a key that no declared flag registered raises `FlagLookupError`,
which keeps a misspelled key apart from a flag that was simply not given.
"""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from flagparse.exceptions import FlagLookupError
from flagparse.flag import Flag


@dataclass(frozen=True)
class ParseOutcome:
    """
    Holds whether a flag was found and its value.

    `value` is empty when the flag was absent, takes no value, or was given an
    empty value. Use `present` to tell those cases apart.
    """

    present: bool = False
    value: str = ""


class ResultTable(Mapping[str, ParseOutcome]):
    """
    Mapping of flag match keys to `ParseOutcome`.

    Keys may be given as match key strings or as `Flag` instances.

    Example:
        table, leftovers = parser.parse()
        present, value = table.try_get_flag(say_flag)
        if table.has_flag("hhelp"):
            print(parser.help())
    """

    def __init__(self, outcomes: Mapping[str, ParseOutcome]) -> None:
        self._outcomes: dict[str, ParseOutcome] = dict(outcomes)

    @staticmethod
    def _key(key: str | Flag) -> str:
        return key.match_key if isinstance(key, Flag) else key

    def __getitem__(self, key: str | Flag) -> ParseOutcome:
        match_key = self._key(key)
        try:
            return self._outcomes[match_key]
        except KeyError:
            raise FlagLookupError(
                f"the key '{match_key}' does not belong to any declared flag"
            ) from None

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Flag):
            key = key.match_key
        return key in self._outcomes

    def __iter__(self) -> Iterator[str]:
        return iter(self._outcomes)

    def __len__(self) -> int:
        return len(self._outcomes)

    def try_get_flag(self, key: str | Flag) -> tuple[bool, str]:
        """
        Return `(present, value)` for a flag.

        Raises:
            FlagLookupError: If no declared flag has this key.
        """
        outcome = self[key]
        return outcome.present, outcome.value

    def has_flag(self, key: str | Flag) -> bool:
        """Return True if the flag was given in the arguments."""
        return self[key].present

    def __repr__(self) -> str:
        return f"ResultTable({self._outcomes!r})"
