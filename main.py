"""
Entry point: prompt for user info, then append it to my_user.txt.

Run with `python main.py` from the directory that should hold the file.
"""

import sys

from userinfo.collector import get_user_info
from userinfo.storage import get_output_path, save_to_file
from userinfo.utils import configure_logging


def main() -> int:
    configure_logging()
    user_info = get_user_info()
    if user_info is not None:
        save_to_file(get_output_path(), user_info)
    # Rejected input and write failures are already reported; neither is fatal
    return 0


if __name__ == "__main__":
    sys.exit(main())
