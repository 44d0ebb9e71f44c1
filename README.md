# yet

`yet` keeps the metadata of a local library of online videos: which channels
and playlists you follow and how, which videos are queued for download, which
ones you are part-way through, and which ones you have finished. It decides
what should be downloaded next, trims metadata that is no longer needed, and
removes downloaded files of videos you have finished watching.

Metadata is stored in a metadata directory as one JSON file per property
(`<property>.json`), each mapping an id to a list of values, so the library
can be inspected and backed up with ordinary tools.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `yet` command. Every command except
`version` works on a data root (default `/usr/share/yet`, change it with
`--root DIR` before the command name); the data directories under it
(`backups`, `input`, `metadata`, `videos`, `posters`, `captions`, `players`,
`yt-dlp`) are created when missing.

```
yet version
yet --root ~/yet add-channel --channel-id UCxxxxxxxx --auto-refresh --auto-download [--download-policy all] [--expand]
yet --root ~/yet remove-channel --channel-id UCxxxxxxxx [--auto-refresh] [--auto-download] [--expand]
yet --root ~/yet remove-playlist --playlist-id PLxxxxxxxx [--auto-refresh] [--auto-download] [--expand]
yet --root ~/yet remove-videos --video-id dQw4w9WgXcQ [--download-queue] [--progress] [--ended] [--force]
yet --root ~/yet queue-channels-downloads
yet --root ~/yet queue-playlists-downloads
yet --root ~/yet scrub-ended-properties
yet --root ~/yet scrub-deposition-properties
yet --root ~/yet cleanup-ended-videos [--now]
```

- `add-channel` stores the chosen settings of a channel.
- `remove-channel`, `remove-playlist` and `remove-videos` remove the settings
  named by the flags (`remove-videos --force` removes the forced-download mark).
- `queue-channels-downloads` and `queue-playlists-downloads` queue the not yet
  ended, not yet queued videos of channels and playlists set to auto-download.
- `scrub-ended-properties` removes non-essential properties of ended videos;
  `scrub-deposition-properties` removes them for every video that is neither
  downloaded-and-not-ended nor listed by an auto-refreshing channel or playlist.
- `cleanup-ended-videos` removes downloaded files and posters of ended,
  non-favourite videos, waiting 24 hours after a video ended unless `--now`
  is given, and removes channel directories left empty.
- `version` prints the version, or `unknown version`.

On failure a command prints `yet: <message>` to standard error and exits with
status 1.

## Library use

Metadata lives in a `Redux` store:

```python
from yet.redux import open_redux
from yet.properties import all_properties

rdx = open_redux("/path/to/metadata", *all_properties())
rdx.add_values("video-title", "dQw4w9WgXcQ", "Some title")
print(rdx.get_last_val("video-title", "dQw4w9WgXcQ"))  # "Some title"
```

Asking for a property that was not opened raises `MissingPropertyError`.

Video and playlist ids can be given as bare ids or as links:

```python
from yet.ids import parse_video_ids, parse_playlist_id

parse_video_ids("https://youtu.be/dQw4w9WgXcQ")   # ["dQw4w9WgXcQ"]
parse_playlist_id("PLxxxxxxxx")                   # "PLxxxxxxxx"
```

Invalid input raises `InvalidIdError`.

Following channels and queueing their newest unwatched videos:

```python
from yet.options import ChannelOptions
from yet.subscriptions import add_channel, queue_channels_downloads

add_channel(rdx, "UCxxxxxxxx", ChannelOptions(auto_refresh=True, auto_download=True))
queue_channels_downloads(rdx)
```

Other building blocks:

- `yet.queue.next_queued_download(rdx, force, now)` returns the next queued
  video that still needs downloading, or `None`.
- `yet.scrub` and `yet.cleanup.cleanup_ended_videos(rdx, layout, now)` do what
  the matching commands do; the latter returns the ids it cleaned up.
- `yet.paths.Layout` resolves the data directories and the paths of posters,
  captions and player scripts.
- `yet.local_video` builds local file names (`channel/title-video-id.mp4`),
  finds a video's local file, and names the yt-dlp binary for a platform.
- `yet.metadata.extract_metadata` turns a decoded player response into video
  properties.
- Page data for a web front end is built by `yet.list_view_model`,
  `yet.history`, `yet.video_view_model`, `yet.collection_view_models` and
  `yet.video_models`; user actions such as toggling settings, marking a video
  as ended or saving playback progress are handled by `yet.updates`.

## Download policies and ended reasons

A channel or playlist is downloaded with the `recent` policy (the ten newest
videos) by default, or with `all`. A finished video is recorded as
`completed`, `skipped` or `seen-enough`.

## What it does not do

`yet` works only on metadata already in its store and files already on disk.
It does not fetch channel, playlist or video pages from the web, download
videos, posters or captions, install or update yt-dlp, make or prune backups,
or serve web pages: the view models and update functions are there for a
front end to use, but no server is included.