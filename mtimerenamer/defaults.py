# Canonical name: YYYY-MM-DD_HH-MM-SS in local time.
STAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"

# stamp_1.ext, stamp_2.ext, ...
INCREMENT_SEPARATOR = "_"

CONFIRM_PROMPT = "Continue? (y/N) "
CONFIRM_ANSWER = "y"
