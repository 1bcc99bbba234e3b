import random

from fauxgen.gender import Gender
from fauxgen.generator import Generator


class FixedSource:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value

    def getrandbits(self, k):
        return self.value


def test_gender_name():
    value = Gender(Generator(random.Random(9))).name()
    assert value in ("masculine", "feminine")


def test_gender_abbr():
    value = Gender(Generator(random.Random(9))).abbr()
    assert value in ("masc", "fem")


def test_gender_fixed_choices():
    assert Gender(Generator(FixedSource(0))).name() == "masculine"
    assert Gender(Generator(FixedSource(1))).abbr() == "fem"