import random

from fauxgen.blood import BLOOD_TYPES, Blood
from fauxgen.generator import Generator


class FixedSource:
    def randrange(self, stop):
        return 0

    def getrandbits(self, k):
        return 0


def test_blood_name():
    value = Blood(Generator(random.Random(5))).name()
    assert value != ""
    assert value in BLOOD_TYPES


def test_blood_name_first():
    assert Blood(Generator(FixedSource())).name() == "A+"