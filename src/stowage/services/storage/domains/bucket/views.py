from typing import Any

from rich.markup import escape

from stowage.core.style import Tone, colorize, visibility_marker
from stowage.services.storage.utils import format_bytes


class BucketView:
    @classmethod
    def render_list(
        cls, buckets: list[dict[str, Any]], context: dict[str, Any]
    ) -> list[str]:
        lines = ["", f"📦 Buckets ({len(buckets)})", ""]

        for bucket in buckets:
            lines.append(
                f"  {visibility_marker(bool(bucket.get('public')))}  "
                f"{escape(str(bucket.get('name')))}"
            )
            if bucket.get("file_size_limit"):
                limit = format_bytes(bucket["file_size_limit"])
                lines.append(colorize(f"    └─ Size Limit: {limit}", Tone.MUTED))

        return lines

    @classmethod
    def render_detail(
        cls, bucket: dict[str, Any], context: dict[str, Any]
    ) -> list[str]:
        public = "🌐 Yes" if bucket.get("public") else "🔒 No"
        lines = [
            "",
            f"📦 Bucket: {escape(str(bucket.get('name')))}",
            "",
            f"  ID:          {escape(str(bucket.get('id')))}",
            f"  Public:      {public}",
            f"  Created:     {escape(str(bucket.get('created_at')))}",
            f"  Updated:     {escape(str(bucket.get('updated_at')))}",
        ]

        if bucket.get("file_size_limit"):
            lines.append(f"  Size Limit:  {format_bytes(bucket['file_size_limit'])}")
        if bucket.get("allowed_mime_types"):
            mime_types = ", ".join(bucket["allowed_mime_types"])
            lines.append(f"  MIME Types:  {escape(mime_types)}")

        return lines
