from typing import Any

from rich.markup import escape

from stowage.core.style import outcome_marker


class UrlView:
    @classmethod
    def render_public(cls, data: dict[str, Any], context: dict[str, Any]) -> list[str]:
        lines = ["", "🔗 Public URL:", "", f"  {escape(data['publicUrl'])}"]

        download = context.get("download")
        if download:
            mode = download if isinstance(download, str) else "enabled"
            lines.append(f"  (Download mode: {escape(mode)})")

        return lines

    @classmethod
    def render_signed(cls, data: dict[str, Any], context: dict[str, Any]) -> list[str]:
        return [
            "",
            f"🔐 Signed URL (expires in {context['expires_in']}s):",
            "",
            f"  {escape(str(data['signedUrl']))}",
        ]

    @classmethod
    def render_signed_upload(
        cls, data: dict[str, Any], context: dict[str, Any]
    ) -> list[str]:
        return [
            "",
            "🔐 Signed Upload URL:",
            "",
            f"  Path:  {escape(str(data.get('path')))}",
            f"  Token: {escape(str(data.get('token')))}",
            f"  Signed URL: {escape(str(data.get('signedUrl')))}",
        ]

    @classmethod
    def render_signed_batch(
        cls, items: list[dict[str, Any]], context: dict[str, Any]
    ) -> list[str]:
        lines = ["", f"🔐 Signed URLs (expires in {context['expires_in']}s):", ""]

        for item in items:
            path = escape(str(item.get("path")))
            if item.get("error"):
                lines.append(
                    f"  {outcome_marker(False)} {path}: {escape(str(item['error']))}"
                )
            else:
                lines.append(f"  {outcome_marker(True)} {path}")
                lines.append(f"    {escape(str(item.get('signedUrl')))}")

        return lines
