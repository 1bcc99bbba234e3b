import random

import pytest

from fauxgen.car import (
    CAR_CATEGORIES,
    CAR_FUEL_TYPES,
    CAR_MAKERS,
    CAR_MODELS,
    CAR_SERIES,
    CAR_TRANSMISSION_GEARS,
    COUNTRY_REGIONS,
    Car,
)
from fauxgen.generator import Generator


def make_car(seed=None):
    return Car(Generator(random.Random(seed)))


def test_maker():
    value = make_car().maker()
    assert value != ""
    assert value in CAR_MAKERS


def test_model():
    value = make_car().model()
    assert value != ""
    assert value in CAR_MODELS


def test_category():
    value = make_car().category()
    assert value != ""
    assert value in CAR_CATEGORIES


def test_fuel_type():
    value = make_car().fuel_type()
    assert value != ""
    assert value in CAR_FUEL_TYPES


def test_transmission_gear():
    value = make_car().transmission_gear()
    assert value != ""
    assert value in CAR_TRANSMISSION_GEARS


@pytest.mark.parametrize("seed", range(20))
def test_plate_shape(seed):
    plate = make_car(seed).plate()
    assert plate != ""
    assert plate[:2] in COUNTRY_REGIONS
    assert plate[-2:] in CAR_SERIES
    digits = plate[2:-2]
    assert len(digits) == 4
    assert digits.isdigit()
    assert 1000 <= int(digits) <= 9999


def test_same_seed_same_plate():
    first = make_car(7).plate()
    second = make_car(7).plate()
    assert first == second
    assert len(first) == 8
    assert first[:2] in COUNTRY_REGIONS
    assert first[-2:] in CAR_SERIES