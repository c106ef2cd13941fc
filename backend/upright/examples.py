"""Worked example used to pre-fill the calculator form.

IKEA Pune, upright B200: 120 x 60 lipped channel with web stiffener,
3.0 mm thick, S350.
"""

from __future__ import annotations

from typing import Any

from .inputs import UprightDesignInput

EXAMPLE_PAYLOAD: dict[str, Any] = {
    "material": {
        "yieldStrength": 350.0,
        "ultimateStrength": 400.0,
        "elasticModulus": 210000.0,
        "shearModulus": 80769.0,
        "materialFactor": 1.1,
    },
    "geometry": {
        "depth": 120.0,
        "breadth": 60.0,
        "lipWidth": 27.5,
        "webThickness": 3.0,
        "flangeThickness": 3.0,
        "lipHeight1": 27.0,
        "lipHeight2": 18.0,
        "webStiffenerDepth": 10.0,
        "webStiffenerLength": 20.0,
        "overallFlangeDimension": 87.5,
    },
    "sectionProperties": {
        "grossArea": 1083.0,
        "perimeter": 368.4,
        "iXx": 2104581.6,
        "iYy": 989904.8,
        "zXx": 35076.4,
        "zYy": 28050.6,
        "warpingConstant": 5567475868.2,
        "torsionConstant": 3315.3,
        "centroidX": 35.3,
        "centroidY": 60.0,
        "shearCenterX": -46.2,
        "shearCenterY": 58.5,
        "ex": -80.1,
        "radiusGyrationX": 44.1,
        "radiusGyrationY": 30.2,
    },
    "effectiveLengths": {
        "unsupportedLenX": 2800.0,
        "unsupportedLenY": 1200.0,
        "unsupportedLenTorsion": 1200.0,
        "effLenFactorX": 1.0,
        "effLenFactorY": 1.0,
        "effLenFactorTorsion": 1.0,
    },
    "appliedLoads": {
        "axialForce": 144.24,
        "momentMx": 0.043,
        "momentMy": 0.963,
        "loadEccentricityX": 0.0,
    },
    "serviceability": {
        "totalUprightHeight": 9200.0,
        "maxInducedSway": 8.296,
    },
    "project_info": {
        "project_name": "IKEA PUNE B200",
        "client": "IKEA",
    },
}


def example_input() -> UprightDesignInput:
    """Return a fresh copy of the worked example as an input record."""
    return UprightDesignInput.from_dict(EXAMPLE_PAYLOAD)
