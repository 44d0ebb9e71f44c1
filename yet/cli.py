"""Command line entry point for managing the video library."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from yet import properties as p
from yet.cleanup import cleanup_ended_videos
from yet.options import ChannelOptions, PlaylistOptions, VideoOptions
from yet.paths import DEFAULT_YET_ROOT_DIR, AbsDir, Layout
from yet.policies import parse_download_policy
from yet.redux import Redux, open_redux
from yet.scrub import scrub_deposition_properties, scrub_ended_properties
from yet.subscriptions import (
    add_channel,
    queue_channels_downloads,
    queue_playlists_downloads,
    remove_channel,
    remove_playlist,
    remove_videos,
)

GIT_TAG = ""


def _add_channel(rdx: Redux, layout: Layout, args: argparse.Namespace) -> None:
    add_channel(
        rdx,
        args.channel_id,
        ChannelOptions(
            auto_refresh=args.auto_refresh,
            auto_download=args.auto_download,
            download_policy=parse_download_policy(args.download_policy),
            expand=args.expand,
            force=args.force,
        ),
    )


def _remove_channel(rdx: Redux, layout: Layout, args: argparse.Namespace) -> None:
    remove_channel(
        rdx,
        args.channel_id,
        ChannelOptions(
            auto_refresh=args.auto_refresh,
            auto_download=args.auto_download,
            expand=args.expand,
            force=args.force,
        ),
    )


def _remove_playlist(rdx: Redux, layout: Layout, args: argparse.Namespace) -> None:
    remove_playlist(
        rdx,
        args.playlist_id,
        PlaylistOptions(
            auto_refresh=args.auto_refresh,
            auto_download=args.auto_download,
            expand=args.expand,
            force=args.force,
        ),
    )


def _remove_videos(rdx: Redux, layout: Layout, args: argparse.Namespace) -> None:
    remove_videos(
        rdx,
        args.video_id,
        VideoOptions(
            download_queue=args.download_queue,
            progress=args.progress,
            ended=args.ended,
            force=args.force,
        ),
    )


def _cleanup(rdx: Redux, layout: Layout, args: argparse.Namespace) -> None:
    cleanup_ended_videos(rdx, layout, args.now)


def _flags(sub: argparse.ArgumentParser, *names: str) -> None:
    for name in names:
        sub.add_argument("--" + name, action="store_true")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="yet", description="Serving your video needs.")
    parser.add_argument("--root", default=DEFAULT_YET_ROOT_DIR, help="data root directory")
    commands = parser.add_subparsers(dest="command", required=True)

    sub = commands.add_parser("add-channel")
    sub.add_argument("--channel-id", required=True)
    sub.add_argument("--download-policy", default="")
    _flags(sub, "auto-refresh", "auto-download", "expand", "force")
    sub.set_defaults(handler=_add_channel)

    sub = commands.add_parser("remove-channel")
    sub.add_argument("--channel-id", required=True)
    _flags(sub, "auto-refresh", "auto-download", "expand", "force")
    sub.set_defaults(handler=_remove_channel)

    sub = commands.add_parser("remove-playlist")
    sub.add_argument("--playlist-id", required=True)
    _flags(sub, "auto-refresh", "auto-download", "expand", "force")
    sub.set_defaults(handler=_remove_playlist)

    sub = commands.add_parser("remove-videos")
    sub.add_argument("--video-id", required=True)
    _flags(sub, "download-queue", "progress", "ended", "force")
    sub.set_defaults(handler=_remove_videos)

    sub = commands.add_parser("cleanup-ended-videos")
    _flags(sub, "now")
    sub.set_defaults(handler=_cleanup)

    for name, func in {
        "queue-channels-downloads": queue_channels_downloads,
        "queue-playlists-downloads": queue_playlists_downloads,
        "scrub-ended-properties": scrub_ended_properties,
        "scrub-deposition-properties": scrub_deposition_properties,
    }.items():
        sub = commands.add_parser(name)
        sub.set_defaults(handler=lambda rdx, layout, args, func=func: func(rdx))

    commands.add_parser("version")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; return the process exit status."""
    args = _parser().parse_args(argv)

    if args.command == "version":
        print(GIT_TAG or "unknown version")
        return 0

    layout = Layout(root=Path(args.root))
    try:
        layout.ensure()
        rdx = open_redux(layout.abs_dir(AbsDir.METADATA), *p.all_properties())
        args.handler(rdx, layout, args)
    except (OSError, ValueError, LookupError) as err:
        print(f"yet: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())