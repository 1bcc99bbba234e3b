# fauxgen

Fake data for tests and fixtures: colours, blood types, car details, bitcoin
and ethereum style addresses, hex digests, address parts, languages, MIME
types, file extensions and more. It needs nothing beyond the Python standard
library.

## Installing

```
pip install fauxgen
```

## Getting started

Everything starts from a `Generator` (in `fauxgen.generator`). It draws its
randomness from any object with `randrange(stop)` and `getrandbits(k)`, such
as `random.Random`; with no argument it makes a fresh `random.Random()`.
Passing a seeded one makes the output repeatable.

Each provider class takes the generator in its constructor:

```python
import random

from fauxgen.generator import Generator
from fauxgen.color import Color
from fauxgen.crypto import Crypto
from fauxgen.blood import Blood

gen = Generator(random.Random(42))

print(Color(gen).hex())               # e.g. "#3FA09C"
print(Blood(gen).name())              # e.g. "AB-"
print(Crypto(gen).bitcoin_address())  # starts with "1", "3" or "bc1"
```

## The generator

`Generator` offers the primitive helpers the providers are built on:

- `int_between(minimum, maximum)`: an integer in the closed range; when the
  range is empty or reversed it returns `minimum`.
- `random_digit()` (0–9), `random_digit_not_null()` (1–8),
  `random_digit_not(*digits)` (raises `ValueError` if every digit is excluded).
- `random_number(size)`: a number with exactly `size` digits.
- `random_float`, `float`, `float32`, `float64`: a value whose whole part lies
  in `[minimum, maximum)`, rounded to single precision.
- `int`, `int8` … `int64`, `uint`, `uint8` … `uint64`, `int32_between`,
  `int64_between`: integers wrapped to the named width.
- `letter()` / `random_letter()`, `random_string_with_length(length)`:
  lower-case ASCII letters.
- `random_string_element`, `random_int_element`, `random_string_map_key`,
  `random_string_map_value`: pick from a sequence or mapping; an empty one
  raises `IndexError`.
- `shuffle_string(text)`: the characters of `text` reversed.
- Pattern filling: `numerify` (`#` becomes a digit), `lexify` (`?` becomes a
  letter), `bothify` (both), `asciify` (`*` becomes a character from `a` to
  `~`).

```python
gen.numerify("Apt. ###")   # "Apt. 418"
gen.bothify("??-####")     # "qk-5093"
gen.int_between(1, 6)
```

## Providers

| Module | Class | Methods |
| --- | --- | --- |
| `fauxgen.boolean` | `Boolean` | `bool`, `bool_with_chance(chance_true)`, `bool_int`, `bool_string(first, second)` |
| `fauxgen.binarystring` | `BinaryString` | `binary_string(length)` |
| `fauxgen.blood` | `Blood` | `name` |
| `fauxgen.gender` | `Gender` | `name` (`masculine`/`feminine`), `abbr` (`masc`/`fem`) |
| `fauxgen.address` | `Address` | `city_prefix`, `city_suffix`, `street_suffix`, `secondary_address`, `building_number`, `post_code`, `state`, `state_abbr`, `country`, `country_abbr`, `country_code`, `latitude`, `longitude` |
| `fauxgen.car` | `Car` | `maker`, `model`, `category`, `fuel_type`, `transmission_gear`, `plate` |
| `fauxgen.color` | `Color` | `hex`, `rgb`, `rgb_as_array`, `css`, `safe_color_name`, `color_name` |
| `fauxgen.crypto` | `Crypto` | `p2pkh_address`, `p2sh_address`, `bech32_address` (each also `*_with_length(length)`), `bitcoin_address`, `etherium_address` |
| `fauxgen.food` | `Food` | `fruit`, `vegetable` |
| `fauxgen.gamer` | `Gamer` | `tag` |
| `fauxgen.genre` | `Genre` | `name`, `name_with_description` |
| `fauxgen.hashing` | `Hash` | `md5`, `sha256`, `sha512`: hex digests of a random lower-case word |
| `fauxgen.mimetype` | `MimeType` | `mime_type` |
| `fauxgen.language` | `Language` | `language`, `language_abbr`, `programming_language` |
| `fauxgen.files` | `File`, `Directory` | `File.extension`, `Directory.drive_letter` |

A few details worth knowing:

- `Boolean.bool_with_chance` returns `False` for a chance of 0 or less and
  `True` for 100 or more.
- Bitcoin addresses never contain `0`, `I`, `O` or `l`; the random
  `p2pkh_address`, `p2sh_address` and `bech32_address` are 26 to 35
  characters long. `etherium_address` is 42 characters starting with `0x`.
- `Address.latitude` and `longitude` return values from 0 up to just below
  100, with six decimals.
- `Address.building_number` fills a digit pattern that keeps its leading `%`.

## What it does not do

There is no single front object bundling all providers; build each provider
from a `Generator` yourself. The package has no person names, so it does not
put together whole cities, street names or full postal addresses, only their
parts. It has no internet data (e-mail addresses, URLs, IP addresses), does
not write image files and makes no network requests.