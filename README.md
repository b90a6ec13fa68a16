# pwpulse

Building blocks for sound-server clients, in plain Python with no
dependencies outside the standard library.

## Modules

- `pwpulse.sample`: sample formats (`SampleFormat`, including host-order
  `...NE`/`...RE` aliases) and `SampleSpec` with `valid()`, `sample_size()`,
  `frame_size()`, `bytes_per_second()`, `bytes_to_usec()` and
  `usec_to_bytes()`. Helpers: `sample_format_valid`, `sample_rate_valid`,
  `channels_valid`, `sample_size_of_format`, `sample_format_to_string`,
  `parse_sample_format` (case-insensitive, returns `SampleFormat.INVALID` for
  unknown names), `sample_format_is_le`, `sample_format_is_be` and
  `bytes_to_string` (e.g. `"1.5 KiB"`).
- `pwpulse.volume`: volume steps where `VOLUME_NORM` is 100 % and
  `VOLUME_MUTED` is silence. `sw_volume_multiply`, `sw_volume_divide`,
  conversions to and from linear factors (cubic curve) and decibels, and the
  text forms `volume_to_string`, `sw_volume_to_db_string` and
  `volume_to_verbose_string`.
- `pwpulse.cvolume`: `Cvolume`, an immutable set of per-channel volumes.
  `uniform`, `avg`, `max`, `min`, `channels_equal_to`, `multiply`,
  `multiply_scalar`, `divide`, `divide_scalar`, `merge`, `scale`, `inc`,
  `inc_clamp`, `dec`, `compatible` (against a `SampleSpec`) and the text forms
  `to_string`, `to_db_string` and `to_verbose_string`. Operations return new
  instances.
- `pwpulse.proplist`: `Proplist`, an insertion-ordered mapping of string keys
  to string values, with `sets`, `setp` (`"key=value"`), `gets`, `unset`,
  `unset_many`, `update` (modes in `UpdateMode`: `SET`, `MERGE`, `REPLACE`),
  `contains`, `clear`, `copy` and `to_string`. `key_valid` checks that a key
  is non-empty 7-bit ASCII; invalid keys raise `ValueError`.
- `pwpulse.timeval`: `Timeval` (seconds plus microseconds) with `from_usec`,
  `to_usec`, and saturating `add` and `sub`; `timeval_diff`, `timeval_age`,
  `gettimeofday` (wall clock) and `rtclock_now` (monotonic microseconds).
- `pwpulse.utf8`: `utf8_valid` and `utf8_filter` on bytes (invalid bytes become
  `_`), `ascii_valid` and `ascii_filter` on text or bytes, and
  `utf8_to_locale` / `locale_to_utf8` using the locale's preferred encoding.
- `pwpulse.json`: a small, strict JSON parser. `parse` returns a `JsonObject`
  whose `type` is a `JsonType` and whose `value` holds the data; objects offer
  `member(name)`, arrays `item(index)`, and `equal` compares doubles within a
  small tolerance. Strings accept printable ASCII only, `\u` escapes are
  rejected, integers are 32-bit, and nesting deeper than twenty levels raises
  `JsonParseError`.
- `pwpulse.util`: `path_get_filename`, `msleep`, `get_user_name`,
  `get_host_name`, `get_fqdn` and `get_binary_name`.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from pwpulse.sample import SampleFormat, SampleSpec, parse_sample_format

spec = SampleSpec(SampleFormat.S16LE, 44100, 2)
spec.frame_size()           # 4
spec.bytes_per_second()     # 176400
str(spec)                   # 's16le 2ch 44100Hz'
parse_sample_format("float32le")   # SampleFormat.FLOAT32LE
```

```python
from pwpulse.cvolume import Cvolume
from pwpulse.volume import VOLUME_NORM, sw_volume_from_db, volume_to_string

v = Cvolume.uniform(2, sw_volume_from_db(-6.0))
v.to_string()
volume_to_string(VOLUME_NORM)   # '100%'
```

```python
from pwpulse.proplist import Proplist

props = Proplist()
props.sets("media.name", "Song")
props.setp("media.role=music")
props.to_string(",")   # 'media.name = "Song",media.role = "music"'
```

```python
from pwpulse.json import parse, JsonParseError

doc = parse('{"rate": 48000, "channels": [1, 2]}')
doc.member("rate").value            # 48000
doc.member("channels").item(1).value  # 2
```

## What this package does not do

It has no main loop, no connection to a sound server, no playback or
recording streams and no command-line program. It provides the value types,
conversions and parsing that such a client would build on.