"""Random car details."""

from __future__ import annotations

from .generator import Generator

CAR_MAKERS = (
    "Acura", "Alfa Romeo", "Audi", "BMW", "Bentley", "Buick", "Cadillac",
    "Chevrolet", "Chrysler", "Dodge", "Fiat", "Ford", "GMC", "Genesis",
    "Honda", "Hyundai", "Infiniti", "Jaguar", "Jeep", "Kia", "Land Rover",
    "Lexus", "Lincoln", "Maserati", "Mazda", "Mercedes-Benz", "Mini",
    "Mitsubishi", "Nissan", "Polestar", "Porsche", "Ram", "Saab", "Smart",
    "Subaru", "Tesla", "Toyota", "Volkswagen", "Volvo",
)

CAR_MODELS = (
    "Q3", "Malibu", "Escalade ESV", "Corvette", "RLX",
    "Silverado 2500 HD Crew Cab", "3 Series", "Pacifica", "Colorado Crew Cab",
    "X3", "TLX", "Silverado 3500 HD Crew Cab", "7 Series", "Fusion", "Envision",
    "SQ5", "R8", "Traverse", "MDX", "QX80", "Encore", "Sierra 2500 HD Crew Cab",
    "Insight", "XT6", "XT5", "XT4", "Enclave", "Q5", "Santa Fe", "EcoSport",
    "Escape", "Mustang", "Sonata", "Edge", "Camaro", "Kona Electric", "Equinox",
    "Sierra 3500 HD Crew Cab", "Gladiator", "X7", "CT6-V", "A7", "Blazer",
    "F150 SuperCrew Cab", "Suburban", "Civic", "Compass", "Escalade", "Voyager",
    "Accord Hybrid", "Terrain", "Spark", "Sierra 1500 Crew Cab", "NEXO",
    "Veloster", "Silverado 1500 Crew Cab", "G70", "CT5", "Odyssey",
    "Elantra GT", "RDX", "Yukon XL", "Ranger SuperCab", "Expedition MAX",
    "Kona", "QX50", "Durango", "Yukon", "Palisade", "Ridgeline", "Cherokee",
    "Bolt EV", "Expedition", "Elantra", "Passport", "Charger", "Accord", "QX60",
    "Venue", "Pilot", "Grand Cherokee", "Tahoe", "Acadia", "Impala", "CR-V",
    "X5", "Q60", "Ranger SuperCrew", "Trax", "Ioniq Plug-in Hybrid", "E-PACE",
    "Tucson", "Explorer", "HR-V", "I-PACE", "Q50", "G80", "F-PACE", "Renegade",
    "Accent",
)

CAR_CATEGORIES = (
    "SUV", "Sedan", "Coupe", "Convertible", "Hatchback", "Pickup", "Van",
    "Minivan", "Wagon",
)

CAR_FUEL_TYPES = ("Bio Gas", "Diesel", "Eletric", "Ethanol", "Hybrid", "Petrol")

CAR_TRANSMISSION_GEARS = (
    "Automatic", "CVT", "Eletronic", "Manual", "Semi-auto", "Tiptronic",
)

CAR_SERIES = (
    "KР", "ВI", "ВO", "АA", "EА", "BА", "PЕ", "НA", "IB", "KА", "KK", "OМ",
    "АM", "TА", "HI", "ОA", "CК", "PВ", "КC", "CА", "TЕ", "XА", "XО", "XМ",
    "MА", "МK", "MО",
)

COUNTRY_REGIONS = (
    "АK", "АB", "АC", "AЕ", "AН", "АM", "АO", "АP", "АT", "AА", "АI", "BА",
    "ВB", "BС", "ВE", "BН", "ВI", "BК", "СH", "ВM", "ВO", "АX", "ВT", "ВX",
    "CА", "CВ", "СE",
)


class Car:
    """Produces car makers, models and registration plates."""

    def __init__(self, faker: Generator) -> None:
        self.faker = faker

    def maker(self) -> str:
        """Return a car maker."""
        return self.faker.random_string_element(CAR_MAKERS)

    def model(self) -> str:
        """Return a car model."""
        return self.faker.random_string_element(CAR_MODELS)

    def category(self) -> str:
        """Return a body category such as ``Sedan``."""
        return self.faker.random_string_element(CAR_CATEGORIES)

    def fuel_type(self) -> str:
        """Return a fuel type."""
        return self.faker.random_string_element(CAR_FUEL_TYPES)

    def transmission_gear(self) -> str:
        """Return a transmission type."""
        return self.faker.random_string_element(CAR_TRANSMISSION_GEARS)

    def plate(self) -> str:
        """Return a plate: region code, four digits and a series code."""
        region = self.faker.random_string_element(COUNTRY_REGIONS)
        number = self.faker.random_number(4)
        series = self.faker.random_string_element(CAR_SERIES)
        return f"{region}{number}{series}"