# immichgo

Building blocks for sorting out a photo collection before it is uploaded to a
photo server. The package is a library and has no dependencies outside the
standard library.

## What it provides

- **Media types** (`immichgo.filetypes`): `SupportedMedia` maps lower-case
  extensions to `"image"`, `"video"`, `"sidecar"` or `"useless"`. Its methods
  are `type_from_ext`, `type_from_name`, `is_media`, `is_ignored_ext`,
  `is_extension_prefix` and `is_useless`. `DEFAULT_SUPPORTED_MEDIA` is the
  built-in table. `is_raw_file(ext)` recognises RAW formats.
- **File name analysis** (`immichgo.filenames`):
  `InfoCollector(tz, sm).get_info(name)` returns a `NameInfo`. It holds the
  base name, radical, extension, type, `Kind`, cover flag, index and capture
  time. Burst, portrait, night, motion and long-exposure names from Pixel,
  Samsung, Nexus, Huawei and Sony Xperia phones are recognised. Other names
  fall back to `take_time_from_path`, which looks for a date in the file
  name, then in each folder from the last one, then in the whole path.
  `take_time_from_name` does the same for one string. A missing date is
  `None`, and a `tz` of `None` means the local zone.
- **Assets and groups** (`immichgo.assets`, `immichgo.fsname`): `Asset` wraps
  an `FSAndName`, a file name bound to an optional file system. `Group` holds
  assets, a `GroupBy` reason and a cover index. `Group.remove_asset` records
  why an asset was taken out.
- **Grouping** (`immichgo.groups`): `burst.group`, `series.group` and
  `epsonfastfoto.group` each take an iterable of assets. They yield the groups
  they detect and pass on the assets they leave alone.
  `pipeline.GrouperPipeline(*groupers).pipe_grouper(assets)` chains them.
  Whatever the last grouper leaves alone comes out as a `GroupBy.NONE` group
  of a single asset.
- **Filters** (`immichgo.filters`): `BurstFlag`, `HeicJpgFlag` and
  `RawJpgFlag` each have a `group_filter()` method. The filter either ungroups
  the group, keeps it stacked, keeps only its RAW, JPEG or HEIC members, or
  chooses its cover. `parse_burst_flag`, `parse_heic_jpg_flag` and
  `parse_raw_jpg_flag` read option values such as `"stackkeepraw"` or
  `"stackcoverjpg"`, case-insensitively. They raise `ValueError` on anything
  else. `apply_filters(group, *filters)` runs the filters on a group that is
  really grouped.
- **Name patterns** (`immichgo.namematcher`): `NameList` holds glob-like
  patterns such as `"@eaDir/"` or `"SYNOFILE_THUMB_*.*"`, matched
  case-insensitively against paths.
- **Cached streams** (`immichgo.fshelper.cachereader`): `CacheReader` keeps a
  stream's content in a file so it can be opened and read many times. A
  temporary file is used, in `IMMICHGO_TEMPDIR` or the user cache directory,
  and is removed on `close()`.
- **Console and containers**: `immichgo.ui.format_bytes` and
  `immichgo.ui.confirm_yes_no` are console helpers. `immichgo.gen` has mapping
  and list helpers and the thread-safe `SyncMap` and `SyncSet`.

## What it does not do

There is no command-line program and no client for a photo server: nothing
here uploads, downloads or talks to a network. The package does not open
directories or zip archives as file systems. It does not walk folders by glob
patterns, compute file hashes, keep a log or journal of processed files, or
run a worker pool. The `immichgo.journal` sub-package holds no modules.

## Install

```
pip install .
```

## Example

```python
from datetime import datetime, timezone

from immichgo.assets import Asset
from immichgo.filenames import InfoCollector
from immichgo.filetypes import DEFAULT_SUPPORTED_MEDIA
from immichgo.filters import apply_filters, parse_raw_jpg_flag
from immichgo.fsname import FSAndName
from immichgo.groups import burst, series
from immichgo.groups.pipeline import GrouperPipeline

ic = InfoCollector(timezone.utc, DEFAULT_SUPPORTED_MEDIA)
info = ic.get_info("00015IMG_00015_BURST20171111030039_COVER.jpg")
print(info.radical, info.kind, info.is_cover, info.taken)

when = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
assets = []
for name in ("IMG_0003.jpg", "IMG_0003.raw"):
    a = Asset(FSAndName(None, name), file_date=when, capture_date=when)
    a.set_name_info(ic.get_info(name))
    assets.append(a)

keep_raw = parse_raw_jpg_flag("keepraw").group_filter()
for g in GrouperPipeline(burst.group, series.group).pipe_grouper(assets):
    g = apply_filters(g, keep_raw)
    print(g.grouping, [a.file.name for a in g.assets])
```

## Tests

```
pip install .[test]
pytest
```