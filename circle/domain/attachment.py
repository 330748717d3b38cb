"""Attachment normalization.

Maps a raw link and its declared kind to a renderable ``Attachment``.
Everything here is deterministic and offline: no requests are made to the
providers, the embed URL is derived from the link alone.
"""

from typing import Optional
from urllib.parse import ParseResult, parse_qs, urlparse

from pydantic import ValidationError as PydanticValidationError

from circle.domain.error import ValidationError
from circle.domain.value import Attachment, AttachmentKind

YOUTUBE_EMBED = "https://www.youtube.com/embed/{}"
VIMEO_EMBED = "https://player.vimeo.com/video/{}"
LOOM_EMBED = "https://www.loom.com/embed/{}"

DEFAULT_DOCUMENT_NAME = "document"

# Attachments are rendered as links, so only web schemes are accepted
ALLOWED_SCHEMES = ("http", "https")


def _parse(url: str) -> Optional[ParseResult]:
    """Parse an absolute URL, returning None when it is not one."""
    try:
        parsed = urlparse(url.strip())
        # Accessing hostname validates bracketed IPv6 hosts
        if not parsed.scheme or not parsed.netloc or not parsed.hostname:
            return None
    except ValueError:
        return None
    return parsed


def resolve_video_embed_url(url: str) -> Optional[str]:
    """Compute the provider embed URL for a video link.

    Supported providers:
    - youtube.com links with a ``v`` query parameter
    - youtu.be short links (first path segment is the id)
    - vimeo.com links (last non-empty path segment is the id)
    - loom.com share links (segment after ``/share/`` is the id)

    Args:
        url: Raw video link, possibly malformed

    Returns:
        Embed URL, or None when the provider is unsupported or the link
        cannot be parsed. None is a normal outcome: render a plain link.
    """
    parsed = _parse(url)
    if parsed is None:
        return None

    host = parsed.hostname or ""
    path = parsed.path

    if "youtube.com" in host:
        params = parse_qs(parsed.query, keep_blank_values=True)
        if "v" in params:
            return YOUTUBE_EMBED.format(params["v"][0])

    if host == "youtu.be":
        video_id = path[1:].split("/")[0]
        return YOUTUBE_EMBED.format(video_id) if video_id else None

    if "vimeo.com" in host:
        segments = [segment for segment in path.split("/") if segment]
        return VIMEO_EMBED.format(segments[-1]) if segments else None

    if "loom.com" in host and "/share/" in path:
        video_id = path.split("/share/")[-1].split("?")[0]
        return LOOM_EMBED.format(video_id) if video_id else None

    return None


def derive_document_name(url: str, fallback: str = DEFAULT_DOCUMENT_NAME) -> str:
    """Display name for a document link: the final path segment of the URL.

    Args:
        url: Document link
        fallback: Name used when the URL has no usable final segment

    Returns:
        File name or the fallback
    """
    parsed = _parse(url)
    if parsed is None:
        return fallback
    return parsed.path.split("/")[-1] or fallback


def normalize_attachment(
    url: str,
    kind: AttachmentKind,
    name: Optional[str] = None,
    fallback_name: str = DEFAULT_DOCUMENT_NAME,
) -> Attachment:
    """Build the attachment descriptor for a raw link.

    Args:
        url: Raw link supplied by the author
        kind: Declared attachment kind
        name: Optional display name (documents only)
        fallback_name: Document name used when none can be derived

    Returns:
        Attachment descriptor

    Raises:
        ValidationError: If the link is blank, uses a non-web scheme, or
            (for non-video kinds) is not an absolute http(s) URL
    """
    url = (url or "").strip()
    if not url:
        raise ValidationError(f"A URL is required for {kind.value} attachments")

    try:
        scheme = urlparse(url).scheme.lower()
    except ValueError as e:
        raise ValidationError(f"Malformed {kind.value} attachment URL") from e
    if scheme and scheme not in ALLOWED_SCHEMES:
        raise ValidationError(f"Unsupported URL scheme for attachment: {scheme}")
    # Videos stay lenient: an unparseable link just gets no embed URL
    if kind != AttachmentKind.VIDEO and _parse(url) is None:
        raise ValidationError(
            f"{kind.value} attachments need an absolute http(s) URL"
        )

    fields: dict = {"kind": kind, "url": url}
    if kind == AttachmentKind.DOCUMENT:
        fields["name"] = (
            name.strip()
            if name and name.strip()
            else derive_document_name(url, fallback_name)
        )
    elif kind == AttachmentKind.VIDEO:
        fields["embed_url"] = resolve_video_embed_url(url)

    try:
        return Attachment(**fields)
    except PydanticValidationError as e:
        raise ValidationError(f"Malformed {kind.value} attachment: {e}") from e
