"""Field helpers shared by the record codecs.

Records are plain comma-separated lines: no header, no quoting and no
escaping. A text field that contains the delimiter or a line break can
therefore never be stored.
"""

from hotel_booking.exceptions import MalformedRecordError

DELIMITER = ","
DATE_FORMAT = "%Y-%m-%d"


def check_text_field(name: str, value: str) -> None:
    """Reject free-text values that would corrupt a record line.

    Raises:
        MalformedRecordError: If the value contains the delimiter or a line break
    """
    if DELIMITER in value or "\n" in value or "\r" in value:
        raise MalformedRecordError(
            f"{name} {value!r} must not contain {DELIMITER!r} or line breaks"
        )


def split_record(line: str, field_count: int, line_number: int | None = None) -> list[str]:
    """Split a record line into exactly ``field_count`` fields.

    Raises:
        MalformedRecordError: If the line has a different number of fields
    """
    fields = line.strip().split(DELIMITER)
    if len(fields) != field_count:
        raise MalformedRecordError(
            f"expected {field_count} fields, got {len(fields)}", line_number
        )
    return fields
