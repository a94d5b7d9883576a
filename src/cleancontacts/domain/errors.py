"""Domain errors."""

from collections.abc import Iterable


class ConsistencyError(Exception):
    """A merge referenced records that are missing from the supplied record set."""

    def __init__(self, missing_ids: Iterable[str]) -> None:
        self.missing_ids = tuple(missing_ids)
        super().__init__(
            "Records missing from the current contact list: "
            + ", ".join(map(str, self.missing_ids))
        )
