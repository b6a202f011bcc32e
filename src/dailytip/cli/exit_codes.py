# topmark:header:start
#
#   project      : DailyTip
#   file         : exit_codes.py
#   file_relpath : src/dailytip/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes for the DailyTip command line tools.

Error codes follow the BSD ``sysexits.h`` conventions so that scripts can tell
bad input data from a misconfigured pipeline.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by ``dailytip`` and ``dailytip-web``.

    Attributes:
        SUCCESS (int): A tip was shown (or help/listing was requested).
        FAILURE (int): Missing or unknown collection names.
        USAGE_ERROR (int): Invalid combination of command line options.
        DATA_ERROR (int): A collection could not be read, is malformed, or is empty.
        CONFIG_ERROR (int): The tip pipeline was used before being fully configured.

    Usage:
        ```python
        import subprocess
        from dailytip.cli.exit_codes import ExitCode

        result = subprocess.run(["dailytip", "productivity-hacks"])
        if result.returncode == ExitCode.DATA_ERROR:
            print("The collection file is broken.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits.h
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    CONFIG_ERROR = 78  # EX_CONFIG
