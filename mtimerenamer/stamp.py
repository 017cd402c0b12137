from datetime import datetime

from .defaults import STAMP_FORMAT

def format_stamp(epoch: int) -> str:
    """Turn epoch seconds into a local-time stamp such as 2024-01-01_10-00-00."""
    return datetime.fromtimestamp(epoch).strftime(STAMP_FORMAT)
