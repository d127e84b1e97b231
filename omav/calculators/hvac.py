"""
HVAC sizing calculator — cooling load in BTU/h, tonnage, ducting, running cost.

Base load is 30 BTU/ft², scaled by building, climate, insulation and window
factors and by ceiling height relative to 8 ft, plus 400 BTU per occupant
and an appliance allowance. 12,000 BTU/h = 1 ton.
"""

import math

from .base import BaseCalculator

BUILDING_FACTORS = {"residential": 1.0, "commercial": 1.2, "industrial": 1.4, "office": 1.1}
LOCATION_FACTORS = {"mild": 0.9, "moderate": 1.0, "hot": 1.2, "extreme": 1.4}
INSULATION_FACTORS = {"poor": 1.3, "average": 1.0, "good": 0.8, "excellent": 0.6}
WINDOW_FACTORS = {"minimal": 0.9, "average": 1.0, "extensive": 1.2, "full": 1.4}
APPLIANCE_BTUS = {"minimal": 1000, "average": 3000, "high": 6000}

BTU_PER_SQFT = 30
BTU_PER_OCCUPANT = 400
BTU_PER_TON = 12000
STANDARD_CEILING_FT = 8

# (upper tonnage bound, recommendation)
SYSTEM_BANDS = [
    (2, "Mini-Split System"),
    (4, "Split System"),
    (10, "Split System or Packaged Unit"),
]
LARGE_SYSTEM = "Commercial Packaged Unit or Multiple Systems"

BRANCH_DUCT_DIAMETER_IN = 6
SQFT_PER_VENT = 150

SEER = 14
HOURS_PER_DAY = 8
DAYS_PER_MONTH = 30
ELECTRICITY_RATE = 0.14  # per kWh

EQUIPMENT_COST_PER_TON = 1500
INSTALLATION_SHARE = 0.7
DUCTWORK_COST_PER_VENT = 250

MAINTENANCE_TIPS = [
    "Replace air filters every 1-3 months",
    "Schedule professional tune-ups annually",
    "Keep outdoor unit clear of debris",
    "Clean air vents and registers regularly",
    "Consider a programmable thermostat for efficiency",
]


def recommend_system(tonnage: float) -> str:
    for upper, recommendation in SYSTEM_BANDS:
        if tonnage < upper:
            return recommendation
    return LARGE_SYSTEM


class HvacCalculator(BaseCalculator):

    key = "hvac"
    title = "HVAC Sizing Calculator"

    def calculate(self, fields: dict) -> dict:
        building_type = self.parse_choice(fields.get("building_type"), "building_type",
                                          BUILDING_FACTORS)
        area = self.parse_number(fields.get("floor_area"), "floor_area", minimum=0)
        ceiling_height = self.parse_number(fields.get("ceiling_height"), "ceiling_height",
                                           default=STANDARD_CEILING_FT, minimum=0)
        location = self.parse_choice(fields.get("location"), "location", LOCATION_FACTORS)
        insulation = self.parse_choice(fields.get("insulation"), "insulation", INSULATION_FACTORS)
        windows = self.parse_choice(fields.get("windows"), "windows", WINDOW_FACTORS)
        occupants = self.parse_int(fields.get("occupants"), "occupants", default=0, minimum=0)
        appliances = self.parse_choice(fields.get("appliances"), "appliances", APPLIANCE_BTUS)

        btus = (area * BTU_PER_SQFT
                * BUILDING_FACTORS[building_type]
                * LOCATION_FACTORS[location]
                * INSULATION_FACTORS[insulation]
                * WINDOW_FACTORS[windows])
        btus *= ceiling_height / STANDARD_CEILING_FT
        btus += occupants * BTU_PER_OCCUPANT
        btus += APPLIANCE_BTUS[appliances]

        tonnage = btus / BTU_PER_TON

        supply_trunk = math.ceil(tonnage * 1.5) + 10  # sq in
        return_trunk = math.ceil(supply_trunk * 1.2)
        vents = math.ceil(area / SQFT_PER_VENT)

        monthly_kwh = (btus / SEER) * HOURS_PER_DAY * DAYS_PER_MONTH / 1000
        monthly_cost = monthly_kwh * ELECTRICITY_RATE

        equipment_cost = tonnage * EQUIPMENT_COST_PER_TON
        installation_cost = equipment_cost * INSTALLATION_SHARE
        ductwork_cost = vents * DUCTWORK_COST_PER_VENT
        total_cost = equipment_cost + installation_cost + ductwork_cost

        return {
            "btus": self.round_half_up(btus),
            "tonnage": self.round_half_up(tonnage, 2),
            "recommended_system": recommend_system(tonnage),
            "ducting": {
                "supply_trunk_size": supply_trunk,
                "return_trunk_size": return_trunk,
                "branch_duct_size": BRANCH_DUCT_DIAMETER_IN,
                "number_of_vents": vents,
            },
            "energy_consumption": {
                "monthly_kwh": self.round_half_up(monthly_kwh),
                "monthly_cost": self.money(monthly_cost),
            },
            "estimated_cost": {
                "equipment_cost": self.round_half_up(equipment_cost),
                "installation_cost": self.round_half_up(installation_cost),
                "ductwork_cost": self.round_half_up(ductwork_cost),
                "total_cost": self.round_half_up(total_cost),
            },
            "maintenance_tips": list(MAINTENANCE_TIPS),
        }
