from typing import Any

from rich.markup import escape

from stowage.core.style import Tone, colorize, outcome_marker
from stowage.services.storage.utils import format_bytes, format_timestamp


def _pick(data: dict[str, Any], *keys: str) -> Any:
    """First non-empty value among keys, looked up on the object then its metadata."""
    metadata = data.get("metadata") or {}
    for source in (data, metadata):
        for key in keys:
            if source.get(key) not in (None, ""):
                return source[key]
    return None


class FileView:
    @classmethod
    def render_list(
        cls, files: list[dict[str, Any]], context: dict[str, Any]
    ) -> list[str]:
        location = context["bucket"]
        if context.get("prefix"):
            location = f"{location}/{context['prefix']}"

        lines = ["", f"📂 Files in {escape(location)} ({len(files)})", ""]

        for entry in files:
            # folders come back without an id
            icon = "📄" if entry.get("id") else "📁"
            size = (entry.get("metadata") or {}).get("size")
            size_text = f" ({format_bytes(size)})" if size else ""
            lines.append(f"  {icon} {escape(str(entry.get('name')))}{size_text}")

            if entry.get("updated_at"):
                updated = format_timestamp(entry["updated_at"])
                lines.append(colorize(f"     └─ Updated: {updated}", Tone.MUTED))

        return lines

    @classmethod
    def render_removed(
        cls, files: list[dict[str, Any]], context: dict[str, Any]
    ) -> list[str]:
        return [
            f"  {outcome_marker(True)} {escape(str(entry.get('name')))}"
            for entry in files
        ]

    @classmethod
    def render_exists(
        cls, result: dict[str, Any], context: dict[str, Any]
    ) -> list[str]:
        path = escape(context["path"])
        if result.get("exists"):
            return [f"{outcome_marker(True)} File exists: {path}"]
        return [colorize("ℹ", Tone.INFO) + f" File does not exist: {path}"]

    @classmethod
    def render_info(cls, info: dict[str, Any], context: dict[str, Any]) -> list[str]:
        size = _pick(info, "size", "contentLength") or 0
        content_type = (
            _pick(info, "content_type", "contentType", "mimetype") or "unknown"
        )
        created = _pick(info, "created_at", "createdAt")
        updated = _pick(
            info, "updated_at", "updatedAt", "last_modified", "lastModified"
        )
        accessed = _pick(info, "last_accessed_at", "lastAccessedAt")
        bucket = _pick(info, "bucket_id", "bucketId") or context["bucket"]

        lines = [
            "",
            f"📄 File: {escape(str(_pick(info, 'name') or context['path']))}",
            "",
            f"  ID:             {escape(str(_pick(info, 'id')))}",
            f"  Bucket:         {escape(str(bucket))}",
            f"  Size:           {format_bytes(size)}",
            f"  Content Type:   {escape(str(content_type))}",
            f"  Created:        {escape(str(created))}",
            f"  Updated:        {escape(str(updated))}",
            f"  Last Accessed:  {escape(str(accessed or 'N/A'))}",
        ]

        cache_control = _pick(info, "cache_control", "cacheControl")
        if cache_control:
            lines.append(f"  Cache Control:  {escape(str(cache_control))}")

        etag = _pick(info, "etag", "eTag")
        if etag:
            lines.append(f"  ETag:           {escape(str(etag))}")

        return lines
