"""
Design (config.py)
- Purpose: Centralize constants: output file, prompts, user-facing messages, record layout.
- Inputs: None.
- Outputs: Constants (strings, templates, logging settings).
- Side effects: None.
"""

# Records are appended here, resolved against the working directory (see storage.get_output_path)
OUTPUT_FILENAME = "my_user.txt"
FILE_ENCODING = "utf-8"

PROMPT_FIRST_NAME = "Enter your first name: "
PROMPT_SURNAME = "Enter your surname: "
PROMPT_AGE = "Enter your age: "

MSG_FIELDS_REQUIRED = "All fields are required."
MSG_INVALID_AGE = "Invalid age. Please enter a number."
MSG_SAVED = "User info saved to {filename}"
MSG_WRITE_FAILED = "Error writing to file: {reason}"

## Record layout: one "Label: value" line per field, closed by the separator line
LABEL_FIRST_NAME = "Name"
LABEL_SURNAME = "Surname"
LABEL_AGE = "Age"
RECORD_SEPARATOR = "---"

# Logging goes to stderr; stdout is reserved for prompts and status lines
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Age must fit a signed 32-bit int
AGE_MIN = -2**31
AGE_MAX = 2**31 - 1
