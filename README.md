# pkgjtool

A small, dependency-free library with building blocks for a game package
downloader: decoding zRIF licences, inflating raw deflate streams with a
preset dictionary, SHA-256 and HMAC-SHA256, plain file and directory helpers,
and the list and catalog logic behind a package browser.

## Installation

```
pip install .
```

For development and tests:

```
pip install .[test]
pytest
```

## Modules

- `pkgjtool.puff`: `puff(source, dictionary=b"", max_output=None)` inflates a
  raw deflate stream. Back-references may reach into `dictionary`, which is not
  part of the output. It returns an `InflateResult` with `data` and `consumed`
  (input bytes used) and raises `InflateError` (a `ValueError` with a `code`
  attribute) on truncated or malformed input or when `max_output` is exceeded.
- `pkgjtool.zrif`: `zrif_decode(text)` turns a base64 zRIF string into the raw
  licence bytes (512 or 1024 long) and raises `ZrifError` otherwise.
  `adler32(data)` computes the zlib checksum. `ZRIF_DICTIONARY` and
  `ZRIF_DICTIONARY_ID` are the preset dictionary and its identifier.
- `pkgjtool.sha256`: the incremental `Sha256` hasher (`update` returns the
  hasher, `digest` and `hexdigest` leave it usable), `sha256_vector(parts)`,
  `hmac_sha256_vector(key, parts)` for at most five parts (more raise
  `ValueError`) and `hmac_sha256(key, data)`.
- `pkgjtool.fileutil`: `file_exists`, `rename` (replaces an existing target),
  `mkdirs`, `rm` (ignores failures), `delete_dir` (a missing directory is not
  an error), `load` and `save`.
- `pkgjtool.dirutil`: `get_size` (None when the path cannot be read),
  `inode_type` returning an `InodeType`, and `list_dir_contents`, which gives
  sorted names and an empty list for a missing directory.
- `pkgjtool.browse`: `ListCursor` for scrolling and selection in a list
  (`move_up`, `move_down`, `page_left`, `page_right`, `reposition`, and
  `ListCursor.from_layout` to size it from pixel heights), `SpeedMeter`, whose
  `speed(offset, now)` refreshes its estimate at most once per second,
  `friendly_size` and `format_speed`.
- `pkgjtool.catalog`: the `Mode`, `ContentType` and `BgdlType` enums,
  `mode_to_type`, `mode_to_bgdl_type`, `mode_partition` and
  `theme_is_installed`.

## Example

```python
from pkgjtool.browse import friendly_size
from pkgjtool.sha256 import Sha256
from pkgjtool.zrif import ZrifError, zrif_decode

print(Sha256(b"abc").hexdigest())
print(friendly_size(1536))  # "1.50 KB"

try:
    rif = zrif_decode(zrif_string)
except ZrifError as exc:
    print(f"bad licence: {exc}")
```

## What it does not do

This is a library only. It has no command, no screen and no downloader: it does
not fetch catalogs or packages over the network, keep a title database, install
anything, read package metadata files, or handle controller input and on-screen
text entry.