import random
import re
import string

import pytest

from fauxgen.files import EXTENSIONS, Directory, File
from fauxgen.generator import Generator

SEEDS = range(20)


def _generator(seed):
    return Generator(random.Random(seed))


def _is_windows_path(path):
    return re.match(r"^[a-zA-Z]:\\", path[:3]) is not None


class _ZeroSource:
    def randrange(self, stop):
        return 0

    def getrandbits(self, k):
        return 0


@pytest.mark.parametrize("seed", SEEDS)
def test_extension(seed):
    value = File(_generator(seed)).extension()
    assert value != ""
    assert value in EXTENSIONS
    assert "." not in value


def test_extension_with_fixed_source():
    assert File(Generator(_ZeroSource())).extension() == "ods"


@pytest.mark.parametrize("seed", SEEDS)
def test_drive_letter(seed):
    letter = Directory(_generator(seed)).drive_letter()
    assert len(letter) == 3
    assert letter[0] in string.ascii_lowercase
    assert letter[1:] == ":\\"
    assert _is_windows_path(letter) is True


def test_drive_letter_with_fixed_source():
    assert Directory(Generator(_ZeroSource())).drive_letter() == "a:\\"