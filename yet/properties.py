"""Names of the metadata properties kept for videos, playlists and channels."""

TRUE_VALUE = "true"
FALSE_VALUE = "false"

VIDEO_TITLE = "video-title"
VIDEO_THUMBNAIL_URLS = "video-thumbnail-urls"
VIDEO_EXTERNAL_CHANNEL_ID = "video-external-channelid"
VIDEO_SHORT_DESCRIPTION = "video-short-description"
VIDEO_VIEW_COUNT = "video-view-count"
VIDEO_KEYWORDS = "video-keywords"
VIDEO_OWNER_CHANNEL_NAME = "video-owner-channel-name"
VIDEO_OWNER_PROFILE_URL = "video-owner-profile-url"
VIDEO_CATEGORY = "video-category"
VIDEO_PUBLISH_DATE = "video-publish-date"
VIDEO_PUBLISH_TIME_TEXT = "video-publish-time-text"
VIDEO_UPLOAD_DATE = "video-upload-date"
VIDEO_PROGRESS = "video-progress"
VIDEO_DURATION = "video-duration"
VIDEO_ENDED_DATE = "video-ended-date"
VIDEO_ENDED_REASON = "video-ended-reason"
VIDEO_ERRORS = "video-errors"
VIDEO_FAVORITE = "video-favorite"

VIDEO_DEHYDRATED_POSTER = "video-dehydrated-poster"
VIDEO_DEHYDRATED_REP_COLOR = "video-dehydrated-rep-color"
VIDEO_DEHYDRATED_INPUT_MISSING = "video-dehydrated-input-missing"

VIDEO_FORCED_DOWNLOAD = "video-forced-download"

VIDEO_DOWNLOAD_QUEUED = "video-download-queued"
VIDEO_DOWNLOAD_STARTED = "video-download-started"
VIDEO_DOWNLOAD_COMPLETED = "video-download-completed"
VIDEO_DOWNLOAD_CLEANED_UP = "video-download-cleaned-up"

VIDEO_CAPTIONS_LANGUAGES = "video-captions-languages"
VIDEO_CAPTIONS_KINDS = "video-captions-kinds"
VIDEO_CAPTIONS_NAMES = "video-captions-names"

PLAYLIST_TITLE = "playlist-title"
PLAYLIST_CHANNEL = "playlist-channel"
PLAYLIST_VIDEOS = "playlist-videos"

PLAYLIST_AUTO_REFRESH = "playlist-auto-refresh"
PLAYLIST_AUTO_DOWNLOAD = "playlist-auto-download"
PLAYLIST_DOWNLOAD_POLICY = "playlist-download-policy"
PLAYLIST_EXPAND = "playlist-expand"

CHANNEL_TITLE = "channel-title"
CHANNEL_DESCRIPTION = "channel-description"
CHANNEL_VIDEOS = "channel-videos"
CHANNEL_PLAYLISTS = "channel-playlists"

CHANNEL_AUTO_REFRESH = "channel-auto-refresh"
CHANNEL_AUTO_DOWNLOAD = "channel-auto-download"
CHANNEL_DOWNLOAD_POLICY = "channel-download-policy"
CHANNEL_EXPAND = "channel-expand"

YT_DLP_LATEST_DOWNLOADED_VERSION = "yt-dlp-latest-downloaded-version"


def video_properties() -> list[str]:
    """All properties kept for videos."""
    return [
        VIDEO_TITLE,
        VIDEO_THUMBNAIL_URLS,
        VIDEO_DEHYDRATED_POSTER,
        VIDEO_DEHYDRATED_REP_COLOR,
        VIDEO_DEHYDRATED_INPUT_MISSING,
        VIDEO_EXTERNAL_CHANNEL_ID,
        VIDEO_SHORT_DESCRIPTION,
        VIDEO_VIEW_COUNT,
        VIDEO_KEYWORDS,
        VIDEO_OWNER_CHANNEL_NAME,
        VIDEO_OWNER_PROFILE_URL,
        VIDEO_CATEGORY,
        VIDEO_PUBLISH_DATE,
        VIDEO_PUBLISH_TIME_TEXT,
        VIDEO_UPLOAD_DATE,
        VIDEO_PROGRESS,
        VIDEO_DURATION,
        VIDEO_ENDED_DATE,
        VIDEO_ENDED_REASON,
        VIDEO_ERRORS,
        VIDEO_FAVORITE,
        VIDEO_FORCED_DOWNLOAD,
        VIDEO_DOWNLOAD_QUEUED,
        VIDEO_DOWNLOAD_STARTED,
        VIDEO_DOWNLOAD_COMPLETED,
        VIDEO_DOWNLOAD_CLEANED_UP,
        VIDEO_CAPTIONS_LANGUAGES,
        VIDEO_CAPTIONS_KINDS,
        VIDEO_CAPTIONS_NAMES,
    ]


def playlist_properties() -> list[str]:
    """All properties kept for playlists."""
    return [
        PLAYLIST_CHANNEL,
        PLAYLIST_TITLE,
        PLAYLIST_VIDEOS,
        PLAYLIST_AUTO_REFRESH,
        PLAYLIST_AUTO_DOWNLOAD,
        PLAYLIST_DOWNLOAD_POLICY,
        PLAYLIST_EXPAND,
    ]


def channel_properties() -> list[str]:
    """All properties kept for channels."""
    return [
        CHANNEL_TITLE,
        CHANNEL_DESCRIPTION,
        CHANNEL_VIDEOS,
        CHANNEL_PLAYLISTS,
        CHANNEL_AUTO_REFRESH,
        CHANNEL_AUTO_DOWNLOAD,
        CHANNEL_DOWNLOAD_POLICY,
        CHANNEL_EXPAND,
    ]


def yt_dlp_properties() -> list[str]:
    """Properties tracking downloaded yt-dlp assets."""
    return [YT_DLP_LATEST_DOWNLOADED_VERSION]


def all_properties() -> list[str]:
    """Every known property: videos, playlists, channels, then yt-dlp."""
    return [
        *video_properties(),
        *playlist_properties(),
        *channel_properties(),
        *yt_dlp_properties(),
    ]