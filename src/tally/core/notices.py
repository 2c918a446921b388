"""Named malformed-input conditions reported to the message sink."""

from enum import Enum


class Notice(Enum):
    """A condition the parser or codec recovered from."""

    MALFORMED_COMMAND_ARGUMENTS = "malformed_command_arguments"
    NON_INTEGER_INDEX = "non_integer_index"
    INVALID_DATE_FORMAT = "invalid_date_format"
    INVALID_DATETIME_FORMAT = "invalid_datetime_format"
    UNRECOGNIZED_SAVE_FILE_ENTRY = "unrecognized_save_file_entry"
