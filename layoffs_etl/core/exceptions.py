"""Error types raised by the cleaning pipeline."""


class LayoffsETLError(Exception):
    """Base class for layoffs ETL errors."""


class ParseError(LayoffsETLError):
    """A date value did not match the expected source format."""

    def __init__(self, row_index: int, field: str, value: str, fmt: str):
        self.row_index = row_index
        self.field = field
        self.value = value
        self.fmt = fmt
        super().__init__(
            f"Row {row_index} (after deduplication): cannot parse {field}={value!r} with format {fmt!r}"
        )
