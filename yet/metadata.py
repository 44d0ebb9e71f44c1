"""Extraction of video metadata properties from a player response."""

from collections.abc import Mapping
from typing import Any

from yet import properties as p


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def extract_metadata(player_response: Mapping[str, Any]) -> dict[str, list[str]]:
    """Map video properties to their values taken from a decoded player response."""
    details = player_response.get("videoDetails") or {}
    micro = (player_response.get("microformat") or {}).get("playerMicroformatRenderer") or {}
    thumbnails = (details.get("thumbnail") or {}).get("thumbnails") or []

    return {
        p.VIDEO_TITLE: [_text(details.get("title"))],
        p.VIDEO_THUMBNAIL_URLS: [_text(t.get("url")) for t in thumbnails],
        p.VIDEO_DURATION: [_text(details.get("lengthSeconds"))],
        p.VIDEO_EXTERNAL_CHANNEL_ID: [_text(details.get("channelId"))],
        p.VIDEO_SHORT_DESCRIPTION: [_text(details.get("shortDescription"))],
        p.VIDEO_VIEW_COUNT: [_text(details.get("viewCount"))],
        p.VIDEO_KEYWORDS: [_text(k) for k in details.get("keywords") or []],
        p.VIDEO_OWNER_CHANNEL_NAME: [_text(micro.get("ownerChannelName"))],
        p.VIDEO_OWNER_PROFILE_URL: [_text(micro.get("ownerProfileUrl"))],
        p.VIDEO_CATEGORY: [_text(micro.get("category"))],
        p.VIDEO_PUBLISH_DATE: [_text(micro.get("publishDate"))],
        p.VIDEO_UPLOAD_DATE: [_text(micro.get("uploadDate"))],
    }