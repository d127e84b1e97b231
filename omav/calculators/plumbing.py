"""
Plumbing materials calculator — pipe runs, fixtures, storage, heater, pump, cost.

Pipe lengths start from per-building-type base runs; each floor above the
first adds 15 ft to the main supply and main drain. Supply pipes use the
chosen material; drainage is always priced as UPVC. Labor is 40% of the
material subtotal (pipes + fixtures + storage).
"""

from .base import BaseCalculator

BUILDING_TYPES = ("residential", "commercial", "industrial")
PIPE_TYPES = ("upvc", "cpvc", "copper")
HEATER_TYPES = ("storage", "instant", "solar", "none")

# building type -> (main supply, branch supply, main drain, branch drain) in ft
BASE_PIPE_LENGTHS = {
    "residential": (30, 15, 40, 20),
    "commercial": (50, 25, 60, 30),
    "industrial": (80, 40, 100, 50),
}
EXTRA_FLOOR_FEET = 15

# pipe type -> nominal size (in) -> price per foot
PIPE_COST_PER_FOOT = {
    "upvc": {"0.5": 15, "0.75": 25, "1": 35, "1.5": 50, "2": 80, "3": 120, "4": 180},
    "cpvc": {"0.5": 25, "0.75": 40, "1": 60, "1.5": 90, "2": 130, "3": 200, "4": 300},
    "copper": {"0.5": 120, "0.75": 180, "1": 240, "1.5": 350, "2": 480, "3": 700, "4": 1000},
}

FIXTURE_COSTS = {
    "Toilet": 5000,
    "Sink/Basin": 3000,
    "Shower": 4000,
    "Bathtub": 15000,
    "Kitchen Sink": 5000,
    "Washing Machine Connection": 1000,
    "Water Heater Connection": 1000,
    "Floor Drain": 500,
    "Main Shut-off Valve": 1200,
    "Angle Valves": 300,
}

# litres per person per day
WATER_USAGE = {"residential": 200, "commercial": 50, "industrial": 100}

# litres of heater capacity per bathroom
HEATER_CAPACITY = {"storage": 50, "instant": 5, "solar": 100, "none": 0}

# (max floors, recommendation)
PUMP_BANDS = [
    (1, "No pump required if municipal pressure is adequate"),
    (3, "0.5 HP pump recommended"),
    (6, "1 HP pump with pressure tank recommended"),
]
LARGE_PUMP = "Multi-stage pump system with pressure booster required"

LABOR_SHARE = 0.4


def pipe_cost_per_foot(pipe_type: str, size: str) -> float:
    return PIPE_COST_PER_FOOT.get(pipe_type, {}).get(size, 0)


def estimate_fixtures(bathrooms: int, kitchens: int) -> list:
    return [
        {"name": "Toilet", "quantity": bathrooms},
        {"name": "Sink/Basin", "quantity": bathrooms + kitchens},
        {"name": "Shower", "quantity": bathrooms},
        {"name": "Bathtub", "quantity": bathrooms // 2},
        {"name": "Kitchen Sink", "quantity": kitchens},
        {"name": "Washing Machine Connection", "quantity": 1},
        {"name": "Water Heater Connection", "quantity": 1},
        {"name": "Floor Drain", "quantity": bathrooms + kitchens},
        {"name": "Main Shut-off Valve", "quantity": 1},
        {"name": "Angle Valves", "quantity": bathrooms * 3 + kitchens * 2},
    ]


def storage_cost(liters: float) -> float:
    """Tiered per-litre tank price."""
    if liters <= 1000:
        return liters * 1.5
    if liters <= 5000:
        return liters * 1.2
    return liters * 1.0


def recommend_pump(floors: int) -> str:
    for max_floors, recommendation in PUMP_BANDS:
        if floors <= max_floors:
            return recommendation
    return LARGE_PUMP


class PlumbingCalculator(BaseCalculator):

    key = "plumbing"
    title = "Plumbing Materials Calculator"

    def calculate(self, fields: dict) -> dict:
        building_type = self.parse_choice(fields.get("building_type"), "building_type",
                                          BUILDING_TYPES, default="residential")
        floors = self.parse_int(fields.get("number_of_floors"), "number_of_floors",
                                default=1, minimum=1)
        bathrooms = self.parse_int(fields.get("number_of_bathrooms"), "number_of_bathrooms",
                                   default=0, minimum=0)
        kitchens = self.parse_int(fields.get("number_of_kitchens"), "number_of_kitchens",
                                  default=0, minimum=0)
        specified_fixtures = self.parse_int(fields.get("number_of_fixtures"),
                                            "number_of_fixtures", default=0, minimum=0)
        pipe_type = self.parse_choice(fields.get("pipe_type"), "pipe_type", PIPE_TYPES,
                                      default="upvc")
        heater_type = self.parse_choice(fields.get("water_heater_type"), "water_heater_type",
                                        HEATER_TYPES, default="storage")
        specified_storage = self.parse_number(fields.get("water_storage_required"),
                                              "water_storage_required", default=0, minimum=0)

        total_fixtures = specified_fixtures or bathrooms * 4 + kitchens * 2
        wet_rooms = bathrooms + kitchens

        main_supply, branch_supply, main_drain, branch_drain = BASE_PIPE_LENGTHS[building_type]
        extra = max(floors - 1, 0) * EXTRA_FLOOR_FEET

        supply_pipes = [
            {"name": "Main Supply Line", "size": "1", "length": main_supply + extra, "quantity": 1},
            {"name": "Branch Supply Lines", "size": "0.75", "length": branch_supply,
             "quantity": wet_rooms},
            {"name": "Fixture Supply Lines", "size": "0.5", "length": 5,
             "quantity": total_fixtures},
        ]
        drainage_pipes = [
            {"name": "Main Drain Line", "size": "4", "length": main_drain + extra, "quantity": 1},
            {"name": "Branch Drain Lines", "size": "2", "length": branch_drain,
             "quantity": wet_rooms},
            {"name": "Fixture Drain Connections", "size": "1.5", "length": 3,
             "quantity": total_fixtures},
            {"name": "Vent Pipes", "size": "2", "length": 15 * floors, "quantity": 1},
        ]
        fixtures = estimate_fixtures(bathrooms, kitchens)

        if building_type == "residential":
            occupancy = bathrooms * 2
        else:
            occupancy = total_fixtures * 2
        water_storage = specified_storage or occupancy * WATER_USAGE[building_type]

        pipe_cost = sum(
            p["length"] * p["quantity"] * pipe_cost_per_foot(pipe_type, p["size"])
            for p in supply_pipes
        )
        pipe_cost += sum(
            p["length"] * p["quantity"] * pipe_cost_per_foot("upvc", p["size"])
            for p in drainage_pipes
        )
        fixture_cost = sum(f["quantity"] * FIXTURE_COSTS[f["name"]] for f in fixtures)
        tank_cost = storage_cost(water_storage)
        labor_cost = (pipe_cost + fixture_cost + tank_cost) * LABOR_SHARE

        return {
            "water_supply_pipes": supply_pipes,
            "drainage_pipes": drainage_pipes,
            "fixtures": fixtures,
            "total_fixture_count": total_fixtures,
            "water_storage_capacity": water_storage,
            "heater_capacity": bathrooms * HEATER_CAPACITY[heater_type],
            "pump_requirement": recommend_pump(floors),
            "estimated_cost": pipe_cost + fixture_cost + tank_cost + labor_cost,
            "material_breakdown": {
                "pipes": pipe_cost,
                "fixtures": fixture_cost,
                "storage": tank_cost,
                "labor": labor_cost,
            },
        }
