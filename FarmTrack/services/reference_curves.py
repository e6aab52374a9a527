# services/reference_curves.py
"""
Curvas de crecimiento de referencia por línea genética.

Fuentes:
- Cobb 500: Cobb Broiler Performance & Nutrition Supplement (2022)
- Ross 308: Aviagen Ross 308 Performance Objectives (2022)
- Arbor Acres: Aviagen Arbor Acres Performance Objectives (2019)
- Hy-Line Brown: Hy-Line Brown Commercial Management Guide (2021)
- Lohmann Brown: Lohmann Brown Management Guide (2018)
- Clarias gariepinus: FAO Aquaculture Feed Resources (2020)
- Channel Catfish: USDA Catfish Production Guide (2019)
- Nile Tilapia: WorldFish Tilapia Growth Standards (2020)
- Red Tilapia: FAO Red Tilapia Culture Manual (2018)

Cada curva es una lista de (edad_días, peso_esperado_g).
"""
from __future__ import annotations

from typing import Dict, List, Tuple

BREED_REFERENCES: List[Dict] = [
    {
        "species": "Broiler",
        "name": "cobb_500",
        "display_name": "Cobb 500",
        "typical_fcr": 1.65,
        "typical_market_weight_g": 2800,
        "typical_days_to_market": 42,
        "curve": [(0, 42), (7, 169), (14, 442), (21, 883), (28, 1476),
                  (35, 2193), (42, 2977), (49, 3809), (56, 4677)],
    },
    {
        "species": "Broiler",
        "name": "ross_308",
        "display_name": "Ross 308",
        "typical_fcr": 1.60,
        "typical_market_weight_g": 2900,
        "typical_days_to_market": 42,
        "curve": [(0, 42), (7, 175), (14, 464), (21, 925), (28, 1533),
                  (35, 2269), (42, 3066), (49, 3913), (56, 4798)],
    },
    {
        "species": "Broiler",
        "name": "arbor_acres",
        "display_name": "Arbor Acres",
        "typical_fcr": 1.70,
        "typical_market_weight_g": 2700,
        "typical_days_to_market": 42,
        "curve": [(0, 42), (7, 172), (14, 455), (21, 910), (28, 1510),
                  (35, 2235), (42, 3025), (49, 3870), (56, 4745)],
    },
    {
        "species": "Layer",
        "name": "hyline_brown",
        "display_name": "Hy-Line Brown",
        "typical_fcr": 2.00,
        "typical_market_weight_g": 2000,
        "typical_days_to_market": 72 * 7,
        "curve": [(0, 38), (7, 65), (14, 105), (21, 160), (28, 230), (35, 315),
                  (42, 415), (49, 525), (56, 645), (63, 770), (70, 900), (77, 1030),
                  (84, 1155), (91, 1275), (98, 1385), (105, 1485), (112, 1575),
                  (119, 1655), (126, 1725)],
    },
    {
        "species": "Layer",
        "name": "lohmann_brown",
        "display_name": "Lohmann Brown",
        "typical_fcr": 2.10,
        "typical_market_weight_g": 1900,
        "typical_days_to_market": 72 * 7,
        "curve": [(0, 38), (7, 68), (14, 110), (21, 168), (28, 240), (35, 325),
                  (42, 425), (49, 535), (56, 655), (63, 780), (70, 910), (77, 1040),
                  (84, 1165), (91, 1285), (98, 1395)],
    },
    {
        "species": "Catfish",
        "name": "clarias_gariepinus",
        "display_name": "Clarias gariepinus (African Catfish)",
        "typical_fcr": 1.20,
        "typical_market_weight_g": 1000,
        "typical_days_to_market": 180,
        "curve": [(0, 5), (15, 25), (30, 65), (45, 125), (60, 210), (75, 320),
                  (90, 450), (105, 600), (120, 770), (135, 950), (150, 1140),
                  (165, 1330), (180, 1520)],
    },
    {
        "species": "Catfish",
        "name": "channel_catfish",
        "display_name": "Channel Catfish",
        "typical_fcr": 1.50,
        "typical_market_weight_g": 900,
        "typical_days_to_market": 180,
        "curve": [(0, 5), (15, 20), (30, 55), (45, 110), (60, 185), (75, 280),
                  (90, 395), (105, 525), (120, 670), (135, 825), (150, 985),
                  (165, 1150), (180, 1315)],
    },
    {
        "species": "Tilapia",
        "name": "nile_tilapia",
        "display_name": "Nile Tilapia",
        "typical_fcr": 1.40,
        "typical_market_weight_g": 600,
        "typical_days_to_market": 180,
        "curve": [(0, 1), (15, 8), (30, 25), (45, 55), (60, 100), (75, 160),
                  (90, 235), (105, 325), (120, 425), (135, 535), (150, 650),
                  (165, 770), (180, 890)],
    },
    {
        "species": "Tilapia",
        "name": "red_tilapia",
        "display_name": "Red Tilapia",
        "typical_fcr": 1.50,
        "typical_market_weight_g": 550,
        "typical_days_to_market": 180,
        "curve": [(0, 1), (15, 7), (30, 22), (45, 50), (60, 92), (75, 148),
                  (90, 218), (105, 302), (120, 395), (135, 497), (150, 605),
                  (165, 718), (180, 830)],
    },
]

# Curva genérica de la especie (breed_id NULL): la línea más difundida
SPECIES_DEFAULT_BREED: Dict[str, str] = {
    "Broiler": "cobb_500",
    "Layer": "hyline_brown",
    "Catfish": "clarias_gariepinus",
    "Tilapia": "nile_tilapia",
}


def reference_by_name(name: str) -> Dict:
    for ref in BREED_REFERENCES:
        if ref["name"] == name:
            return ref
    raise KeyError(name)


def species_curves() -> Dict[str, List[Tuple[int, float]]]:
    return {
        species: reference_by_name(breed_name)["curve"]
        for species, breed_name in SPECIES_DEFAULT_BREED.items()
    }
