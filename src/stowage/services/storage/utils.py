from datetime import datetime
from pathlib import PurePosixPath

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".pdf": "application/pdf",
    ".json": "application/json",
    ".txt": "text/plain",
    ".mp4": "video/mp4",
    ".mp3": "audio/mpeg",
}


def format_bytes(size: float) -> str:
    """
    Human-readable size using 1024-based units, rounded to two decimals
    with trailing zeros dropped (1536 -> '1.5 KB').
    """
    if not size:
        return "0 B"

    exponent = 0
    value = float(size)
    while abs(value) >= 1024 and exponent < len(SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    value = round(value, 2)

    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[exponent]}"


def get_content_type(filename: str) -> str:
    extension = PurePosixPath(filename.replace("\\", "/")).suffix.lower()
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)


def remote_basename(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).name


def format_timestamp(value: str | None) -> str:
    """
    Render an ISO-8601 timestamp in local time. Unparseable values are
    returned unchanged.
    """
    if not value:
        return "N/A"

    try:
        parsed = datetime.fromisoformat(str(value))
    except ValueError:
        return str(value)

    return parsed.astimezone().strftime("%Y-%m-%d %H:%M:%S")
